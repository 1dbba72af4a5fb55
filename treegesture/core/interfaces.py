"""
TreeGesture Core Interfaces.
Defines the abstract contract for the collaborators that consume the core.
"""

from abc import ABC, abstractmethod

from treegesture.core.types import InteractionEvent, ModeChangeEvent

class IInteractionListener(ABC):
    """
    Rendering/UI side of the handoff.
    Events are snapshots: listeners must not try to feed state back.
    """

    @abstractmethod
    def on_interaction(self, event: InteractionEvent) -> None: pass

    @abstractmethod
    def on_mode_change(self, event: ModeChangeEvent) -> None: pass
