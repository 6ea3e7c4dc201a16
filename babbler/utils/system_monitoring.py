#!/usr/bin/env python3
"""
System Monitoring Module

Snapshots process resource usage so that generation runs can be logged with
their memory and CPU footprint.
"""

import os
import time
import threading
from datetime import datetime

import psutil


class ResourceMonitor:
    """
    Collects resource usage for the current process and times operations.
    """

    def __init__(self, logger):
        """
        Args:
            logger: Logger instance for recording resource metrics
        """
        self.logger = logger
        self.process = psutil.Process(os.getpid())

        self.current_operation = None
        self.operation_start_time = None

        # Prime the CPU counter; the first non-blocking reading is always 0.0
        self.process.cpu_percent(interval=None)

    def get_resource_usage(self):
        """
        Get a resource usage snapshot without blocking.

        Returns:
            dict: Memory, CPU and thread metrics for this process
        """
        memory_info = self.process.memory_info()
        system_memory = psutil.virtual_memory()

        return {
            "timestamp": datetime.now().isoformat(),
            "memory": {
                "current_mb": memory_info.rss / (1024 * 1024),
                "system_percent": system_memory.percent,
            },
            "cpu": {
                "process_percent": self.process.cpu_percent(interval=None),
                "logical_cores": psutil.cpu_count(logical=True),
            },
            "threads": threading.active_count(),
            "process_id": os.getpid()
        }

    def start(self, operation):
        """Mark the beginning of a timed operation."""
        self.current_operation = operation
        self.operation_start_time = time.time()
        self.logger.debug(f"Operation started: {operation}", extra={
            "metrics": {"operation": operation, "system": self.get_resource_usage()}
        })

    def elapsed(self):
        """Seconds since `start`, or 0.0 when nothing is running."""
        if self.operation_start_time is None:
            return 0.0
        return time.time() - self.operation_start_time

    def log_progress(self, message, operation=None, extra_metrics=None):
        """
        Log a message together with the current resource snapshot.

        Args:
            message (str): Log message
            operation (str, optional): Operation name; defaults to the running one
            extra_metrics (dict, optional): Additional metrics to include
        """
        metrics = {
            "operation": operation or self.current_operation,
            "elapsed_seconds": self.elapsed(),
            "system": self.get_resource_usage(),
        }
        if extra_metrics:
            metrics.update(extra_metrics)
        self.logger.info(message, extra={"metrics": metrics})

    def stop(self):
        """
        Finish the running operation.

        Returns:
            float: Duration of the operation in seconds
        """
        duration = self.elapsed()
        if self.current_operation is not None:
            self.logger.debug(f"Operation finished: {self.current_operation}", extra={
                "metrics": {
                    "operation": self.current_operation,
                    "duration_seconds": duration,
                }
            })
        self.current_operation = None
        self.operation_start_time = None
        return duration
