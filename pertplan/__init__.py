"""PERT project estimation.

Milestones and tasks with optimistic/most-likely/pessimistic estimates,
rolled up into expected durations, confidence bands and exports.
"""

__version__ = "1.0.0"
