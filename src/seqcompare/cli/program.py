import argparse
import logging
import sys

from seqcompare.cli import compare
from seqcompare.engine.exceptions.base import SequenceComparisonException
from seqcompare.engine.settings import ComparisonSettings

logger = logging.getLogger(__name__)

root_parser = argparse.ArgumentParser(
    prog="seqcompare",
    description="Scores the optimal global alignment of every pair of sequences in a FASTA-style file."
)

root_parser.add_argument(
    "sequences",
    help="The sequence file. Records start with a \">\" header line."
)

root_parser.add_argument("match", help="Score for aligning two identical residues (a 32-bit integer).")
root_parser.add_argument("mismatch", help="Score for aligning two different residues (a 32-bit integer).")
root_parser.add_argument("gap", help="Score for aligning a residue against a gap (a 32-bit integer).")

root_parser.add_argument(
    "--threads", "-t",
    dest="threads",
    required=False,
    default=1,
    type=int,
    help="Number of threads aligning pairs concurrently. Output order is unaffected."
)

root_parser.add_argument(
    "--max-line-length",
    dest="max_line_length",
    required=False,
    default=None,
    type=int,
    help="Reject input containing lines longer than this many characters. Unbounded if not provided."
)

root_parser.add_argument(
    "--max-sequences",
    dest="max_sequences",
    required=False,
    default=None,
    type=int,
    help="Reject input containing more records than this. Unbounded if not provided."
)

root_parser.add_argument(
    "--max-matrix-cells",
    dest="max_matrix_cells",
    required=False,
    default=None,
    type=int,
    help="Skip (or fail, with --stop-on-fail) pairs whose score matrix would exceed this many cells."
)

root_parser.add_argument(
    "--stop-on-fail",
    action="store_true",
    dest="stop_on_fail",
    required=False,
    default=False,
    help="Abort the whole run when a pair cannot be aligned instead of skipping it."
)

root_parser.add_argument(
    "--csv",
    dest="csv",
    required=False,
    default=None,
    type=str,
    help="Also write the results to this CSV file."
)

root_parser.add_argument(
    "--log-level",
    dest="log_level",
    required=False,
    default="WARNING",
    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    help="Logging verbosity (logs are written to standard error)."
)

def run(argv=None):
    args = root_parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format='[%(levelname)s] %(message)s')
    try:
        settings = ComparisonSettings.from_namespace(args)
        compare.run_asynchronously(settings)
    except SequenceComparisonException as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
