from __future__ import annotations

import argparse
import logging

from rotor_balance.services.logging_setup import install_excepthook, setup_logging


def _parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="rotor_balance", description="Static and dynamic balancing simulator")
    p.add_argument("--masses", type=int, default=None, help="cantidad inicial de masas (1-4)")
    p.add_argument("--log-dir", default="logs", help="carpeta de logs")
    p.add_argument("--debug", action="store_true", help="log por tick (nivel DEBUG)")
    return p.parse_args(argv)


def run(argv=None):
    args = _parse_args(argv)
    logger = setup_logging(log_dir=args.log_dir, level=logging.DEBUG if args.debug else logging.INFO)
    install_excepthook(logger)

    # Qt/matplotlib se importan después de configurar el logging
    from rotor_balance.ui.main_window import main
    main(mass_count=args.masses)


if __name__ == "__main__":
    run()
