"""Tracing module: logs backtracking search steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the search."""

    timestamp: float
    step_number: int
    action_type: str  # 'examine', 'accept', 'reject', 'goal', 'backtrack'
    depth: int = 0
    state: Optional[str] = None  # rendered configuration (can be large)
    is_valid: Optional[bool] = None
    reason: Optional[str] = None


class Tracer:
    """Records search steps for debugging and analysis.

    With ``echo`` set, every recorded step is also printed as it happens.
    """

    _ECHO_LABELS = {
        "examine": "Current config",
        "accept": "\tValid successor",
        "reject": "\tInvalid successor",
        "goal": "\tGoal config",
    }

    def __init__(self, enabled: bool = True, echo: bool = False):
        self.enabled = enabled
        self.echo = echo
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, config: Any, depth: int, **fields: Any) -> None:
        self.step_counter += 1
        state = str(config) if config is not None else None
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            depth=depth,
            state=state,
            **fields,
        ))
        label = self._ECHO_LABELS.get(action_type)
        if self.echo and label:
            print(f"{label}:\n{state}")

    def log_examine(self, config: Any, depth: int) -> None:
        """Log the configuration about to be examined."""
        if not self.enabled:
            return
        self._record("examine", config, depth)

    def log_successor(self, config: Any, is_valid: bool, depth: int) -> None:
        """Log a generated successor and whether it passed the validity check."""
        if not self.enabled:
            return
        self._record("accept" if is_valid else "reject", config, depth, is_valid=is_valid)

    def log_goal(self, config: Any, depth: int) -> None:
        """Log when a goal configuration is reached."""
        if not self.enabled:
            return
        self._record("goal", config, depth, is_valid=True)

    def log_backtrack(self, config: Any, depth: int, reason: str = "Successors exhausted") -> None:
        """Log a configuration whose subtree holds no solution."""
        if not self.enabled:
            return
        self._record("backtrack", config, depth, reason=reason)

    def to_csv(self, filepath: Path, include_large_states: bool = False) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = ['timestamp', 'step_number', 'action_type', 'depth', 'is_valid', 'reason']
        if include_large_states:
            fieldnames.append('state')

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()

            for step in self.steps:
                row = asdict(step)
                if not include_large_states:
                    row.pop('state', None)
                writer.writerow(row)

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_accepted': action_counts.get('accept', 0),
            'num_rejected': action_counts.get('reject', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer (disabled until enabled explicitly)."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=False)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
