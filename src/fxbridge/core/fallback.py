import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Result of one attempt: either ``value`` or an ``error`` message with its code."""

    value: Any = None
    error: Optional[str] = None
    code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "Outcome":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, code: str = "ERROR") -> "Outcome":
        return cls(error=error, code=code)


def probe(fn: Callable[[], Any], default: Any = None) -> Any:
    """Call ``fn`` and return ``default`` if it raises.

    Used for detection signals and other reads whose failure only means
    "not available here".
    """
    try:
        return fn()
    except Exception as exc:
        logger.debug("probe %s failed: %s", getattr(fn, "__name__", fn), exc)
        return default


def first_success(
    attempts: Iterable[Tuple[str, Callable[[], Outcome]]],
    stop: Optional[Callable[[Outcome], bool]] = None,
) -> Outcome:
    """Run attempts in order and return the first successful outcome.

    A failure for which ``stop`` returns True ends the run and is returned
    as is. Otherwise, if every attempt fails, the last failure is returned.
    """
    last = Outcome.failure("No attempt was made")
    for label, attempt in attempts:
        outcome = attempt()
        if outcome.ok:
            return outcome
        logger.info("%s failed: %s", label, outcome.error)
        if stop is not None and stop(outcome):
            return outcome
        last = outcome
    return last
