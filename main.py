"""
Main entrypoint: prediction service or one-off analysis.

  python main.py serve                       # FastAPI prediction service on API_HOST:API_PORT
  python main.py analyze --mag 8 --pga 0.4 --soil clay --material brick --floors 12 [--mode scientific]

Env: API_HOST, API_PORT, PREDICTION_URL, PREDICTION_TIMEOUT_SEC, PREDICTION_SEED, LOG_LEVEL, LOG_FORMAT.

Service only: uvicorn seismo_damage.api_server.app:app --host 0.0.0.0 --port 3001
"""

import argparse
import json
import sys

# Configure structured logging before other imports that may log
from seismo_damage.seismo_logging import get_logger

logger = get_logger("main")


def serve(args: argparse.Namespace) -> int:
    """Run the prediction service with uvicorn."""
    from seismo_damage.config import get_settings
    from seismo_damage.api_server.app import app
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api_host
    port = args.port or settings.api_port
    logger.info("main_server_starting", host=host, port=port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())
    return 0


def analyze(args: argparse.Namespace) -> int:
    """Run one analysis and print the report as JSON."""
    from seismo_damage.analysis_engine.models import AnalysisInput
    from seismo_damage.analytics.analytics_pipeline import run_analysis
    from seismo_damage.core.exceptions import InvalidInputError
    from seismo_damage.ml.prediction_client import PredictionClient

    try:
        inputs = AnalysisInput(
            magnitude=args.mag,
            pga=args.pga,
            soil_type=args.soil,
            material_type=args.material,
            floor_count=args.floors,
        )
    except InvalidInputError as e:
        logger.error("main_invalid_input", field=e.field, error=str(e))
        print(f"invalid input: {e}", file=sys.stderr)
        return 2

    client = PredictionClient(url=args.url) if args.mode == "scientific" else None
    report = run_analysis(inputs, args.mode, client=client)
    print(json.dumps(report.to_dict(), indent=2))
    if report.notice:
        print(report.notice, file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Earthquake structural damage estimation")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the prediction service")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=serve)

    p_analyze = sub.add_parser("analyze", help="Estimate damage for one building")
    p_analyze.add_argument("--mag", required=True, help="Moment magnitude (Mw)")
    p_analyze.add_argument("--pga", required=True, help="Peak ground acceleration (g)")
    p_analyze.add_argument("--soil", default="unknown")
    p_analyze.add_argument("--material", default="unknown")
    p_analyze.add_argument("--floors", required=True)
    p_analyze.add_argument("--mode", choices=("deterministic", "scientific"), default="deterministic")
    p_analyze.add_argument("--url", default=None, help="Prediction endpoint (default PREDICTION_URL)")
    p_analyze.set_defaults(func=analyze)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
