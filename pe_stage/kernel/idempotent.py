"""
Treats the existence of a destination as proof that the step producing it
already ran.

There is no ledger: a guarded operation that fails leaves its destination
absent, so the next call simply runs it again. Operations passed to the
guard must therefore write to a temporary location and move into the
guarded path as their last action.
"""
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from pe_stage.internal.logging import get_logger
from pe_stage.kernel.contracts import UI, Skipped

logger = get_logger(__name__)

T = TypeVar("T")


def idempotent(
    path: Path,
    description: str,
    operation: Callable[[], T],
    ui: Optional[UI] = None,
) -> Union[Skipped, T]:
    if Path(path).exists():
        logger.info("step already satisfied", description=description, marker=str(path))
        if ui is not None:
            ui.info(f"{description} is already present.")
        return Skipped(description)

    logger.debug("running guarded step", description=description, marker=str(path))
    return operation()
