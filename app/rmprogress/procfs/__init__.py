"""Process-info filesystem inspection.

This module provides process and descriptor locators, metadata readers,
and the progress estimator built on top of them.
"""

from rmprogress.procfs.descriptors import DescriptorLocator
from rmprogress.procfs.errors import (
    DescriptorTableError,
    ProcessReadError,
    ProcfsError,
    ProcRootUnavailableError,
    RmProgressError,
)
from rmprogress.procfs.estimator import ProgressEstimator, build_lookup, match_descriptor
from rmprogress.procfs.models import ProgressObservation
from rmprogress.procfs.processes import DEFAULT_PROC_ROOT, ProcessLocator

__all__ = [
    "DEFAULT_PROC_ROOT",
    "DescriptorLocator",
    "DescriptorTableError",
    "ProcRootUnavailableError",
    "ProcessLocator",
    "ProcessReadError",
    "ProcfsError",
    "ProgressEstimator",
    "ProgressObservation",
    "RmProgressError",
    "build_lookup",
    "match_descriptor",
]
