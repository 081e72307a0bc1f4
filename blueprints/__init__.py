# ruff: noqa: N812

from .client import blp as BlueprintClient
from .health import blp as BlueprintHealth
from .reset import blp as BlueprintReset
from .welcome import blp as BlueprintWelcome

__all__ = ['BlueprintClient', 'BlueprintHealth', 'BlueprintReset', 'BlueprintWelcome']
