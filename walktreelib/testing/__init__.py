"""Testing utilities for WalkTreeLib consumers."""

from .fixtures import WalkRecorder, sample_tree, nested_tree, build_tree

__all__ = ["WalkRecorder", "sample_tree", "nested_tree", "build_tree"]
