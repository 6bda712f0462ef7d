import argparse
import json
import logging
import sys

from services.scorer import score_dict


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Score a speech practice attempt")
    parser.add_argument("input", nargs="?", help="JSON file with the scoring input (default: stdin)")
    parser.add_argument("--log-level", default="INFO", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: INFO)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as f:
                payload = json.load(f)
        else:
            payload = json.load(sys.stdin)
    except (OSError, json.JSONDecodeError) as e:
        logging.error(f"Could not read scoring input: {e}")
        return 2

    if not isinstance(payload, dict):
        logging.error("Scoring input must be a JSON object")
        return 2

    result = score_dict(payload)
    logging.info(f"Scored attempt: total={result['total']} locale={result['diagnostics']['locale']}")
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
