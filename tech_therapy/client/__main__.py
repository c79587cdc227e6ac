"""Terminal client: python -m tech_therapy.client"""
import argparse
import sys
from typing import Optional
from ..config import Config
from ..logging_config import setup_logging
from ..modes import MODE_CARDS, Mode
from .http_client import TherapyClient
from .session import TherapySession
from .terminal import TerminalPlayer


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tech_therapy.client",
        description="Get affirmations, encouragement or a roast about the tech that is bugging you."
    )
    parser.add_argument("--mode", choices=[mode.value for mode in Mode], help="Support mode (asks if omitted)")
    parser.add_argument("--tech", help="Technology that is frustrating you (asks if omitted)")
    parser.add_argument("--url", default=Config.get_api_url(), help="Therapy API base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show client logs")
    return parser.parse_args(argv)


def prompt_mode() -> Mode:
    """Ask the user to pick a mode from the three cards."""
    modes = list(Mode)
    print("\nHow can we help you today?\n")
    for number, mode in enumerate(modes, start=1):
        card = MODE_CARDS[mode]
        print(f"  {number}. {card.icon} {card.title} - {card.description}")

    while True:
        choice = input("\nPick 1-3: ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(modes):
            return modes[int(choice) - 1]
        if choice in {mode.value for mode in modes}:
            return Mode(choice)
        print("Please pick one of the listed modes.")


def prompt_tech() -> str:
    while True:
        tech = input("What's frustrating you? (e.g. Kubernetes, Docker, JavaScript...) ").strip()
        if tech:
            return tech


def run_once(session: TherapySession, client: TherapyClient, mode: Mode, tech: str) -> bool:
    """Select, submit and play one request. Returns True if it succeeded."""
    session.select_mode(mode)
    session.submit(tech)
    session.start_stream(client)
    TerminalPlayer(session).play()
    session.wait()

    if session.failed:
        print(f"\nSorry, that didn't work: {session.error}", file=sys.stderr)
        return False
    return True


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING", log_to_file=False, log_to_console=True)

    client = TherapyClient(base_url=args.url)
    session = TherapySession()
    # Blank --tech means ask interactively
    tech_arg = (args.tech or "").strip()
    one_shot = bool(args.mode and tech_arg)

    try:
        while True:
            mode = Mode(args.mode) if args.mode else prompt_mode()
            tech = tech_arg or prompt_tech()
            ok = run_once(session, client, mode, tech)

            if one_shot:
                return 0 if ok else 1
            if input("\n← Start over? [y/N] ").strip().lower() not in ("y", "yes"):
                return 0 if ok else 1
            session.restart()
    except (KeyboardInterrupt, EOFError):
        session.restart()
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
