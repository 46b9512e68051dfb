from invoke import task


@task
def env(c):
    """
    Create/update the project virtual environment and install dependencies.
    """
    c.run("uv pip install -e '.[dev]'")


@task
def test(c):
    """
    Run the test suite.
    """
    c.run("uv run pytest tests", pty=True)


@task(pre=[env], help={"transport": "\"stdio\" (default) or \"sse\""})
def run(c, transport="stdio"):
    """
    Launch the NBA Query MCP server.
    """
    c.run(f"uv run python -m nba_query --transport {transport}", pty=True)


@task(help={"question": "Question to answer, e.g. \"Curry career 3P%\""})
def ask(c, question):
    """
    Answer one question and print the per-game table.
    """
    c.run(f"uv run python -m nba_query --ask \"{question}\" --games", pty=True)
