"""
Undo/redo history built on forward/inverse action pairs
"""

from typing import Any, Callable, Deque, List, Tuple, TYPE_CHECKING
from collections import deque
from dataclasses import dataclass
import copy
import logging

if TYPE_CHECKING:
    from .commands import BaseCommand

logger = logging.getLogger(__name__)

ActionFunction = Callable[..., Any]


@dataclass(frozen=True)
class Action:
    """One undoable unit: forward and inverse effects plus the arguments
    snapshotted when it was pushed. Every apply or revert receives a fresh
    copy of the snapshot, so live state never aliases it."""
    forward: ActionFunction
    inverse: ActionFunction
    args: Tuple[Any, ...]

    def apply(self) -> None:
        self.forward(*copy.deepcopy(self.args))

    def revert(self) -> None:
        self.inverse(*copy.deepcopy(self.args))


class History:
    """
    Past and future stacks of actions.

    Arguments are deep-copied on push, so mutating live state afterwards
    never changes what undo or redo replays. Pushing a new action always
    discards the redo future.

    Not thread-safe: callers that share a History across threads must
    serialize access themselves.
    """

    def __init__(self):
        self._past: List[Action] = []
        self._future: Deque[Action] = deque()

    def push(self, forward: ActionFunction, inverse: ActionFunction, *args: Any) -> Action:
        """
        Run forward and record it as undoable

        Args:
            forward: Applies the change, called with the copied args
            inverse: Reverts the change, called with the same copied args
            *args: Arguments snapshotted with copy.deepcopy before forward runs

        Returns:
            The recorded action
        """
        action = Action(forward, inverse, copy.deepcopy(args))
        action.apply()

        self._past.append(action)
        self._future.clear()
        return action

    def execute(self, command: 'BaseCommand', target: Any) -> Action:
        """Push a typed command applied against target (usually a Diagram)"""
        logger.debug(f"Executing {command.kind}")
        return self.push(
            lambda cmd: cmd.apply(target),
            lambda cmd: cmd.reverse(target),
            command
        )

    def undo(self) -> None:
        if not self._past:
            return

        action = self._past.pop()
        action.revert()
        self._future.appendleft(action)
        logger.debug(f"Undo ({len(self._past)} left, {len(self._future)} to redo)")

    def redo(self) -> None:
        if not self._future:
            return

        action = self._future.popleft()
        action.apply()
        self._past.append(action)
        logger.debug(f"Redo ({len(self._past)} applied, {len(self._future)} to redo)")

    @property
    def undo_available(self) -> bool:
        return len(self._past) > 0

    @property
    def redo_available(self) -> bool:
        return len(self._future) > 0

    @property
    def past(self) -> Tuple[Action, ...]:
        return tuple(self._past)

    @property
    def future(self) -> Tuple[Action, ...]:
        return tuple(self._future)

    def clear(self) -> None:
        """Drop both stacks without running any action"""
        self._past.clear()
        self._future.clear()
