import argparse
import json
import sys

from common.constants import PATHS, REPEATS
from common.utils import setup_logging
from debuggers import RecommendationStepEngine, ReviewStepEngine, StepEngineError


def run_trace(logger, engine, value):
    """Walk an engine from step 1 to its last step, logging every transition."""
    snapshot = engine.initialize(value)
    logger.info("=" * REPEATS)
    logger.info(f"{engine.name.upper()} DEBUGGER ({engine.max_steps} steps)")
    logger.info("=" * REPEATS)

    while True:
        entry = snapshot["step_log"][-1]
        logger.info(f"Step {entry['step']}: {entry['title']} - {entry['detail']}")
        if snapshot["completed"]:
            break
        snapshot = engine.advance()

    logger.info("✓ Trace completed")
    return snapshot


def main(argv=None):
    """Parse arguments and run one debugger to completion."""
    parser = argparse.ArgumentParser(description="Step through a toy recommendation or review analysis")
    subparsers = parser.add_subparsers(dest="debugger", required=True)

    recommend_parser = subparsers.add_parser("recommend", help="Trace item-to-item collaborative filtering")
    recommend_parser.add_argument("product", help="Product name, e.g. Laptop")

    review_parser = subparsers.add_parser("review", help="Trace lexicon sentiment and aspect detection")
    review_parser.add_argument("text", help="Review text")

    args = parser.parse_args(argv)
    logger = setup_logging("debug_trace", PATHS["app_log_file"])

    if args.debugger == "recommend":
        engine, value = RecommendationStepEngine(), args.product
    else:
        engine, value = ReviewStepEngine(), args.text

    try:
        snapshot = run_trace(logger, engine, value)
    except StepEngineError as e:
        logger.error(f"Trace failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(snapshot, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
