"""Mine frequent itemsets and association rules from a basket file or sample dataset."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from basket_mining.config import ALGORITHMS, ConfigurationError, MiningConfig, RunConfig
from basket_mining.data.export import write_result
from basket_mining.data.ingestion import read_basket_csv, read_transactions
from basket_mining.service import DatasetCatalog
from basket_mining.workflows.pipeline import compare_engines, run_mining


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        type=Path,
        help="Basket file: one transaction per line, or a long-format CSV with --csv.",
    )
    source.add_argument(
        "--sample",
        default="market_basket",
        help="Name of a built-in dataset (used when --input is not given).",
    )
    parser.add_argument("--csv", action="store_true", help="Read --input as order_id,product_id rows.")
    parser.add_argument("--separator", default=",")
    parser.add_argument("--min-support", type=float, default=0.4)
    parser.add_argument("--min-confidence", type=float, default=0.6)
    parser.add_argument("--algorithm", choices=ALGORITHMS, default="fp-growth")
    parser.add_argument("--compare", action="store_true", help="Run both engines and check they agree.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory receiving itemsets.json and rules.json.",
    )
    parser.add_argument("--log-level", default="INFO")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = RunConfig(
        mining=MiningConfig(
            min_support=args.min_support,
            min_confidence=args.min_confidence,
            algorithm=args.algorithm,
        ),
        output_root=args.output,
        separator=args.separator,
    )
    try:
        config.mining.validate()
    except ConfigurationError as exc:
        parser.error(str(exc))
    if args.csv and args.input is None:
        parser.error("--csv requires --input")

    if args.input is not None:
        if args.csv:
            transactions = read_basket_csv(args.input)
        else:
            transactions = read_transactions(args.input, config.separator)
    else:
        try:
            transactions = DatasetCatalog(separator=config.separator).transactions(args.sample)
        except KeyError:
            names = ", ".join(DatasetCatalog().names())
            parser.error(f"unknown sample {args.sample!r}; choose from {names}")

    if args.compare:
        comparison = compare_engines(transactions, config.mining)
        print("Engines agree:", comparison.equivalent)
        result = comparison.fp_growth if config.mining.algorithm == "fp-growth" else comparison.apriori
    else:
        result = run_mining(transactions, config.mining)

    for size, group in result.itemsets.items():
        print(f"Frequent {size}-itemsets:")
        for entry in group:
            print(f"  {{{', '.join(entry.items)}}}  support={entry.support:.3f}")
    print("Rules:")
    for rule in result.rules:
        print(
            f"  {{{', '.join(rule.antecedent)}}} -> {{{', '.join(rule.consequent)}}}"
            f"  support={rule.support:.3f} confidence={rule.confidence:.3f} lift={rule.lift:.3f}"
        )

    outputs = config.outputs
    if outputs is not None:
        write_result(result, outputs)
        print("Results saved under:", outputs.root)


if __name__ == "__main__":
    main()
