"""Entry point for ``python -m simplecalc``."""

from simplecalc import REGISTRY
from simplecalc.adapters.cli import cli_main


def main():
    cli_main([func_desc.function for func_desc in REGISTRY.functions])


if __name__ == "__main__":
    main()
