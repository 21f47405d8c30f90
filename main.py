# Main.py
""""" Entry point for the scientific calculator.

   Responsibilities:
   - Load configuration and set up logging
   - Evaluate an expression from the arguments or the clipboard
   - Otherwise run an interactive prompt with a session history

"""""
import sys
import logging
import argparse

import pyperclip

from CalcEngine import config_manager, MathEngine
from CalcEngine import error as E
from CalcEngine.history import History

logger = logging.getLogger("scicalc")


def build_parser():
    parser = argparse.ArgumentParser(prog="scicalc", description="Scientific expression calculator.")
    parser.add_argument("expression", nargs="*", help="expression to evaluate, e.g. 'sqrt(16) + 2 ** 3'")
    parser.add_argument("--paste", action="store_true", help="evaluate the clipboard contents")
    parser.add_argument("--copy", action="store_true", help="copy the result to the clipboard")
    parser.add_argument("--set", dest="assignments", action="append", default=[], metavar="KEY=VALUE",
                        help="change a setting in config.json")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def store_settings(assignments):
    """Apply and persist --set KEY=VALUE pairs."""
    all_settings = config_manager.load_setting_value("all")
    for assignment in assignments:
        key, value = config_manager.parse_setting(assignment)
        all_settings[key] = value
    config_manager.save_setting(all_settings)
    return all_settings


def run_once(problem, settings, copy=False):
    ergebnis = MathEngine.evaluate_expression(problem, settings)
    print(ergebnis)
    if copy:
        pyperclip.copy(ergebnis)
    return 1 if ergebnis == "Error" else 0


def repl(settings, stdin=sys.stdin):
    """Interactive prompt; every evaluation goes into the session history."""
    history = History(settings["history_size"])

    while True:
        print("Enter the problem: ", end="", flush=True)
        line = stdin.readline()
        if not line:
            break
        problem = line.strip()

        if problem in ("quit", "exit"):
            break
        elif problem == "history":
            for item in history.items():
                print(f"{item.expression} = {item.result}")
        elif problem == "clear":
            history.clear()
        elif problem:
            ergebnis = MathEngine.evaluate_expression(problem, settings)
            history.record(problem, ergebnis)
            print(ergebnis)
    return history


def main(argv=None):
    """
    Load configuration and dispatch to one-shot, clipboard or interactive mode.
    - Keep this thin: no calculation logic here.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = config_manager.load_setting_value("all")
        config_manager.validate_settings(settings)
        if args.assignments:
            settings = store_settings(args.assignments)
    except E.ConfigurationError as e:
        area, _ = E.describe(e.code)
        print(f"{area}: {e.message}", file=sys.stderr)
        return 2

    setup_logging(args.debug or settings["debug"])
    logger.debug("Config loaded: %s", settings)

    if args.paste:
        clipboard_text = pyperclip.paste()
        if not settings["after_paste_enter"]:
            print(clipboard_text)
            return 0
        return run_once(clipboard_text, settings, copy=args.copy)

    if args.expression:
        return run_once(" ".join(args.expression), settings, copy=args.copy)

    if args.assignments:
        return 0

    repl(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
