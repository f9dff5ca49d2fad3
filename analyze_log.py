"""
Typing log inspector entry point.
"""
import sys
from log_inspector import LogInspector


def main():
    """Main entry point for the typing log inspector."""
    app = LogInspector()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
