"""
Text reports: console summary and the persistent run log.

Unit conversions for display (m → km, J → kJ) happen here only.
"""

import os

from .quantities import MotionMetrics


LOG_RULE = '============================================='
LOG_HEADER = '============= PROJECTILE MOTION ============='


def format_report(metrics: MotionMetrics) -> str:
    """The six-line block appended to the run log."""
    lines = [
        LOG_HEADER,
        f"         Flight Time: {metrics.flight_time:f} s",
        f"         Range: {metrics.range_total / 1e3:f} km",
        f"         Maximum Altitude: {metrics.max_altitude / 1e3:f} km",
        f"         Ascent Time: {metrics.ascent_time:f} s",
        f"         Descent Time: {metrics.descent_time:f} s",
        f"         Heat Produced: {metrics.heat_produced / 1e3:f} kJ",
        LOG_RULE,
    ]
    return '\n'.join(lines) + '\n'


def format_summary(metrics: MotionMetrics, v0: float = None,
                   alpha0: float = None) -> str:
    """Human-readable summary box."""
    lines = [f"╔══════════════════════════════════════════════════════╗"]
    if v0 is not None and alpha0 is not None:
        lines += [
            f"║  Launch vel   : {v0:>10.1f} m/s{'':<22s} ║",
            f"║  Elevation    : {alpha0:>10.1f} °{'':<24s} ║",
            f"╠══════════════════════════════════════════════════════╣",
        ]
    lines += [
        f"║  Flight time  : {metrics.flight_time:>10.3f} s{'':<24s} ║",
        f"║  Range        : {metrics.range_total / 1e3:>10.3f} km{'':<23s} ║",
        f"║  Max altitude : {metrics.max_altitude / 1e3:>10.3f} km{'':<23s} ║",
        f"║  Ascent time  : {metrics.ascent_time:>10.3f} s{'':<24s} ║",
        f"║  Descent time : {metrics.descent_time:>10.3f} s{'':<24s} ║",
        f"║  Heat produced: {metrics.heat_produced / 1e3:>10.3f} kJ{'':<23s} ║",
        f"╚══════════════════════════════════════════════════════╝",
    ]
    return '\n'.join(lines)


def append_report(metrics: MotionMetrics, log_path: str) -> str:
    """Append the report block to log_path, creating its directory."""
    parent = os.path.dirname(log_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(log_path, 'a', encoding='utf-8') as fh:
        fh.write(format_report(metrics))
    return log_path


def clear_log(log_path: str) -> str:
    """Empty the run log (created if missing)."""
    parent = os.path.dirname(log_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(log_path, 'w', encoding='utf-8'):
        pass
    return log_path
