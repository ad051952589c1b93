"""Layered application framework: frame loop, layer stack, timing, logging and profiling."""

__version__ = "0.1.0"

__all__ = ["application", "clock", "layer", "layer_stack", "log", "profiler", "sandbox"]