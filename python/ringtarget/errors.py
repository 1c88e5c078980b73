"""Exceptions raised while producing a target PDF."""

from __future__ import annotations


class TargetError(RuntimeError):
    """Base class for rendering failures that should stop the run."""


class AssetError(TargetError):
    """The decoration image could not be loaded or decoded."""


class RenderError(TargetError):
    """The PDF backend reported a failure."""


__all__ = ["TargetError", "AssetError", "RenderError"]
