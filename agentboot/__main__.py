"""Allow ``python -m agentboot``."""

from agentboot.cli import app

if __name__ == "__main__":
    app()
