"""Hand a finished report to the mail program or to an arbitrary command."""
from __future__ import annotations
import subprocess
from typing import Any, Callable, Protocol, Sequence, Union

from .errors import DeliveryError

MAIL_SUBJECT = "stale dataset report"


def mail_subject(name: str) -> str:
    return f"{MAIL_SUBJECT} [{name}]"


class Deliverer(Protocol):
    def deliver(self, text: str) -> None: ...


Echo = Callable[[str], Any]


def _pipe(cmd: Union[str, Sequence[str]], text: str, timeout: float, echo: Echo, shell: bool = False) -> int:
    try:
        proc = subprocess.run(cmd, input=text, text=True, shell=shell, timeout=timeout)
    except OSError as e:
        raise DeliveryError(f"could not run {cmd!r}: {e}") from e
    except subprocess.TimeoutExpired as e:
        raise DeliveryError(f"{cmd!r} did not finish within {timeout:g}s") from e
    if proc.returncode != 0:
        echo(f"[WARN] {cmd!r} exited with status {proc.returncode}")
    return proc.returncode


class MailDelivery:
    def __init__(self, mailer: str, subject: str, recipients: Sequence[str], timeout: float = 30.0,
                 echo: Echo = print):
        self.mailer = mailer
        self.subject = subject
        self.recipients = tuple(recipients)
        self.timeout = timeout
        self.echo = echo

    def argv(self) -> list[str]:
        return [self.mailer, "-s", self.subject, *self.recipients]

    def deliver(self, text: str) -> None:
        _pipe(self.argv(), text, self.timeout, self.echo)


class CommandDelivery:
    """Runs ``command`` through the shell with the report on its stdin."""

    def __init__(self, command: str, timeout: float = 30.0, echo: Echo = print):
        self.command = command
        self.timeout = timeout
        self.echo = echo

    def deliver(self, text: str) -> None:
        _pipe(self.command, text, self.timeout, self.echo, shell=True)
