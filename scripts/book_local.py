#!/usr/bin/env python3
"""
Interactive booking wizard in the terminal.

Usage:
  uvicorn paddelup.main:app          # in one shell
  python3 scripts/book_local.py      # in another

Walks through the three booking steps and submits to BOOKING_API_URL,
exactly like the web form does.
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from paddelup.application.use_cases.booking_wizard import BookingWizard
from paddelup.core.config import settings
from paddelup.domain.entities.booking_draft import WizardStep
from paddelup.wiring.dependencies import get_booking_wizard, get_service_catalog


class _Quit(Exception):
    pass


class _Back(Exception):
    pass


def _print_header() -> None:
    print("\nPaddelUp Booking")
    print("Book your padel session in just a few steps!")
    print("-" * 60)
    print(f"booking api: {settings.BOOKING_API_URL}")
    print("Commands: /back, /quit, /help")
    print("-" * 60)


def _print_footer() -> None:
    print("-" * 60)
    print(f"(c) {date.today().year} PaddelUp. All rights reserved.")
    print("Contact us: info@paddelup.com | Phone: +1 (234) 567-890")


def _ask(prompt: str, current: str = "") -> str:
    suffix = f" [{current}]" if current else ""
    try:
        text = input(f"{prompt}{suffix}: ").strip()
    except (EOFError, KeyboardInterrupt):
        raise _Quit()

    cmd = text.lower()
    if cmd in ("/quit", "/exit"):
        raise _Quit()
    if cmd == "/back":
        raise _Back()
    if cmd == "/help":
        print("  /back -> previous step")
        print("  /quit -> exit without booking")
        return _ask(prompt, current)
    return text or current


def _render(wizard: BookingWizard) -> None:
    state = wizard.state
    print(f"\n=== Step {int(state.step)} of {state.total_steps} ===")
    if state.message:
        tag = "OK" if state.message_type == "success" else "!!"
        print(f"[{tag}] {state.message}")


def _step_service(wizard: BookingWizard) -> None:
    options = get_service_catalog().list_services()
    print("Choose Your Session Type:")
    for i, option in enumerate(options, 1):
        marker = "*" if option.service == wizard.state.draft.service else " "
        print(f" {marker} {i}. {option.label}")

    choice = _ask("Option number")
    if choice.isdigit() and 1 <= int(choice) <= len(options):
        wizard.select_service(options[int(choice) - 1].service)
    elif choice:
        wizard.select_service(choice)
    wizard.next_step()


def _step_date_time(wizard: BookingWizard) -> None:
    draft = wizard.state.draft
    wizard.set_field("date", _ask("Select Date (YYYY-MM-DD)", draft.date))
    wizard.set_field("time", _ask("Select Time (HH:MM)", draft.time))
    wizard.next_step()


def _step_contact(wizard: BookingWizard) -> None:
    draft = wizard.state.draft
    wizard.set_field("name", _ask("Your Name", draft.name))
    wizard.set_field("email", _ask("Email Address", draft.email))
    wizard.set_field("phone", _ask("Phone Number", draft.phone))
    print("Submitting...")
    wizard.submit()


STEP_HANDLERS = {
    WizardStep.SELECT_SERVICE: _step_service,
    WizardStep.SELECT_DATE_TIME: _step_date_time,
    WizardStep.CONTACT_INFO: _step_contact,
}


def main() -> None:
    wizard = get_booking_wizard()
    _print_header()

    while True:
        _render(wizard)
        try:
            STEP_HANDLERS[wizard.state.step](wizard)
        except _Back:
            wizard.previous_step()
        except _Quit:
            print("\nBye!")
            _print_footer()
            return


if __name__ == "__main__":
    main()
