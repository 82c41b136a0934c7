"""
CLI entry point, when used as a module: `python -m osclient`.

Useful for debugging in the IDEs (use the start-mode "Module", module "osclient").
"""
from osclient import cli

if __name__ == '__main__':
    cli.main()
