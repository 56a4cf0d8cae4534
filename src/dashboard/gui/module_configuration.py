"""Configuration shared by a module and the controls hosted inside it."""

from dataclasses import dataclass


@dataclass
class ModuleConfiguration:
    """Identity and presentation details of a hosted module."""
    module_id: int = -1
    title: str = ""
