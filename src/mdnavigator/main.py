from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI when arguments are present and to the GUI
otherwise, and installs a global exception hook so that fatal crashes are
logged and reported on the active interface.
"""

import logging
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions and report them on the active interface.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("mdnavigator.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    # CLI: full trace to stderr
    if len(sys.argv) > 1:
        print("\n" + "=" * 80, file=sys.stderr)
        print("CRITICAL ERROR (MDNAVIGATOR CLI)", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        sys.exit(1)

    try:
        from mdnavigator.interface.gui.app import show_fatal_error
        show_fatal_error(
            f"A critical error occurred in the interface:\n\n{error_msg}\n\n"
            f"Technical details have been saved to the log file."
        )
    except Exception as e:
        logger.error(f"Fatal error dialog failed: {e}")
        print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)

    sys.exit(1)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI or the GUI depending on the command line.

    Returns:
        int: Process exit code.
    """
    try:
        if len(sys.argv) > 1:
            from mdnavigator.interface.cli.app import main as cli_main
            return cli_main()

        from mdnavigator.interface.gui.app import main as gui_main
        gui_main()
        return 0

    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
