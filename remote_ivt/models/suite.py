"""Suite step reports."""

from dataclasses import dataclass

from remote_ivt.models.command import CommandResult


@dataclass(frozen=True)
class StepReport:
    """Outcome of one step of an IVT suite."""

    name: str
    result: CommandResult | None = None

    @property
    def succeeded(self) -> bool:
        """Steps without a command (file uploads) succeed by completing."""
        return self.result is None or self.result.succeeded
