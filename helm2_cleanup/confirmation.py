"""
Confirmation gate shown before any destructive action.
"""

from __future__ import annotations

import logging
from typing import Callable

from .exceptions import ConfirmationError
from .options import CleanupPlan

CONFIRM_ACTION = "Cleanup"
CONFIRM_MESSAGE = "cleanup Helm v2 data"

ConfirmPrompt = Callable[[str, str], bool]


def build_warning_message(plan: CleanupPlan) -> str:
    """Return the warning listing exactly the categories the plan will remove."""
    labels = []
    if plan.config_cleanup:
        labels.append('"Helm v2 Configuration"')
    if plan.release_cleanup:
        if plan.scoped_to_release:
            labels.append(f"\"Release '{plan.release_name}' Data\"")
        else:
            labels.append('"Release Data"')
    if plan.tiller_cleanup:
        labels.append('"Tiller"')

    lines = [f"WARNING: {' '.join(labels)} will be removed."]
    if plan.release_cleanup and not plan.scoped_to_release:
        lines.append(
            "This will clean up all releases managed by Helm v2. It will not be possible "
            "to restore them if you haven't made a backup of the releases."
        )
    if not plan.scoped_to_release:
        lines.append("Helm v2 may not be usable afterwards.")
    return "\n".join(lines)


def confirm_action(action: str, message: str) -> bool:
    """
    Ask the operator a yes/no question.

    Only 'y' or 'yes' (case-insensitive) confirms; anything else declines.

    Raises:
        ConfirmationError: If the answer cannot be read from the terminal.
    """
    try:
        response = input(f"[{action}/confirm] Are you sure you want to {message}? [y/N]: ")
    except (EOFError, OSError) as exc:
        raise ConfirmationError(f"could not read confirmation: {str(exc) or 'end of input'}") from exc
    return response.strip().lower() in {"y", "yes"}


def confirm_cleanup(plan: CleanupPlan, prompt: ConfirmPrompt = confirm_action) -> bool:
    """Print the warning and return whether cleanup may proceed."""
    print(build_warning_message(plan))
    print()

    if plan.skip_confirmation:
        logging.info("Skipping confirmation before performing cleanup.")
        return True

    if not prompt(CONFIRM_ACTION, CONFIRM_MESSAGE):
        logging.info("Cleanup will not proceed as the user didn't answer (Y|y) in order to continue.")
        return False
    return True
