import csv
import sys

import click

from ..checker import check_answer
from ..utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_COLUMNS = ('user_answer', 'correct_answer')
TRUE_VALUES = ('true', 'yes', '1', 'match')
FALSE_VALUES = ('false', 'no', '0', 'no match')


def parse_expected(value, line_number):
    """
    Parse the optional expected column.

    Returns:
        True/False, or None when the cell is empty
    """
    value = (value or '').strip().lower()
    if not value:
        return None
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise click.ClickException(f"Line {line_number}: invalid expected value {value!r}")


@click.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def batch(file):
    """Check every answer pair in a CSV file."""
    with open(file, newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise click.ClickException(f"Missing columns: {', '.join(missing)}")
        rows = list(reader)

    passed = 0
    failed = 0

    for line_number, row in enumerate(rows, start=2):
        user_answer = row['user_answer'] or ''
        correct_answer = row['correct_answer'] or ''
        expected = parse_expected(row.get('expected'), line_number)

        result = check_answer(user_answer, correct_answer)
        actual = "MATCH" if result else "NO MATCH"
        print(f"\nTest: '{user_answer}' vs '{correct_answer}'")
        print(f"Actual: {actual}")

        if expected is None:
            continue

        print(f"Expected: {'MATCH' if expected else 'NO MATCH'}")
        if result == expected:
            passed += 1
            print("Status: ✓ PASS")
        else:
            failed += 1
            print("Status: ✗ FAIL")
            logger.info(f"Mismatch on line {line_number}: '{user_answer}' vs '{correct_answer}'")

    print(f"\n{'=' * 50}")
    print(f"Checked {len(rows)} answers")
    if passed or failed:
        print(f"Results: {passed}/{passed + failed} expectations met")

    if failed:
        sys.exit(1)
