"""
Diagnostic utilities.

Process resource reporting around long-running scans. Memory figures are in
MB; every helper degrades to an ``error`` entry instead of raising, so
diagnostics can never break a precompute run.
"""

import logging
import threading
from typing import Any

import psutil

logger = logging.getLogger(__name__)

_MB = 1024 * 1024


def _to_mb(n_bytes: float) -> float:
    return round(n_bytes / _MB, 2)


def get_memory_info() -> dict[str, Any]:
    """Resident/virtual size of this process plus system availability."""
    try:
        process = psutil.Process()
        mem = process.memory_info()
        system = psutil.virtual_memory()
        info = {
            'process_rss_mb': _to_mb(mem.rss),
            'process_vms_mb': _to_mb(mem.vms),
            'process_memory_percent': round(process.memory_percent(), 2),
            'system_available_mb': _to_mb(system.available),
            'system_used_percent': system.percent,
        }
    except Exception as e:
        return {'error': f'Failed to get memory info: {e}'}
    else:
        return info


def get_thread_info() -> dict[str, Any]:
    """Python-level and OS-level thread counts."""
    info: dict[str, Any] = {
        'active_count': threading.active_count(),
        'main_thread_alive': threading.main_thread().is_alive(),
    }
    try:
        info['system_threads'] = psutil.Process().num_threads()
    except Exception as e:
        logger.debug('Failed to get system thread count: %s', e)
    return info


def log_memory_usage(context: str = '', baseline: dict[str, Any] | None = None) -> None:
    """
    Log current RSS and available memory.

    With a ``baseline`` from get_memory_info() the RSS growth since then is
    logged too.
    """
    info = get_memory_info()
    label = f' ({context})' if context else ''
    rss = info.get('process_rss_mb')
    growth = ''
    if baseline is not None and rss is not None and 'process_rss_mb' in baseline:
        growth = f', delta={rss - baseline["process_rss_mb"]:+.2f}MB'
    logger.info(
        'Memory usage%s: RSS=%sMB, Available=%sMB%s',
        label,
        rss if rss is not None else 'N/A',
        info.get('system_available_mb', 'N/A'),
        growth,
    )


def log_comprehensive_diagnostics(
    operation: str = 'general',
    level: int = logging.INFO,
) -> None:
    """Log a block with memory and thread figures for an operation."""
    title = operation.upper()
    memory = get_memory_info()
    threads = get_thread_info()

    logger.log(level, '=== DIAGNOSTIC INFO: %s ===', title)
    if 'error' in memory:
        logger.log(level, 'Memory - %s', memory['error'])
    else:
        logger.log(
            level,
            'Memory - RSS: %sMB, VMS: %sMB, System Available: %sMB (%s%% used)',
            memory['process_rss_mb'],
            memory['process_vms_mb'],
            memory['system_available_mb'],
            memory['system_used_percent'],
        )
    logger.log(
        level,
        'Threads - Active: %s, System: %s, Main alive: %s',
        threads['active_count'],
        threads.get('system_threads', 'N/A'),
        threads['main_thread_alive'],
    )
    logger.log(level, '=== END DIAGNOSTIC INFO: %s ===', title)
