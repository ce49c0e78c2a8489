"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Context, task


@task(name="lint")
def lint(ctx: Context) -> None:
    """Run linting (no fixes) - for CI."""
    ctx.run("ruff check")
    ctx.run("ruff format --check")


@task(name="format")
def format_and_check(ctx: Context) -> None:
    """Format code using ruff - for local dev."""
    ctx.run("ruff check src tests --fix")
    ctx.run("ruff format src tests")


@task(name="test")
def run_tests(ctx: Context, keyword: str | None = None) -> None:
    """Run tests.

    Args:
        keyword: Only run tests matching this pytest -k expression.
    """
    selection = f" -k '{keyword}'" if keyword else ""
    ctx.run(f"pytest{selection}")
