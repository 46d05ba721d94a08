import click

from ..checker import calculate_points, check_answer


@click.command()
@click.argument('user_answer')
@click.argument('correct_answer')
@click.option('--points', type=click.IntRange(min=0), default=None, help='Clue value to score.')
@click.option('--override', 'overrides', multiple=True, help='Additional accepted answer.')
def check(user_answer, correct_answer, points, overrides):
    """Check a single answer against the correct answer."""
    accepted = check_answer(user_answer, correct_answer, overrides)
    print(f"Answer: '{user_answer}'")
    print(f"Correct answer: '{correct_answer}'")
    print(f"Verdict: {'MATCH' if accepted else 'NO MATCH'}")

    if points is not None:
        print(f"Points: {calculate_points(user_answer, correct_answer, points)}")
