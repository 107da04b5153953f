"""
Tests for the run log and the figures built from a finished trajectory.
Run: python -m pytest tests/ -v
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from projectile_trajectory.quantities import MotionMetrics
from projectile_trajectory.reporting import (
    format_report, format_summary, append_report, clear_log, LOG_HEADER,
)
from projectile_trajectory.simulation import simulate
from projectile_trajectory.visualization import (
    plot_results, create_trajectory_animation, ensure_output_dir,
)


@pytest.fixture
def metrics():
    return MotionMetrics(
        flight_time=7.5,
        range_total=1500.0,
        max_altitude=250.0,
        ascent_time=3.0,
        descent_time=4.5,
        heat_produced=2000.0,
    )


class TestReporting:

    def test_report_block(self, metrics):
        lines = format_report(metrics).splitlines()
        assert lines == [
            '============= PROJECTILE MOTION =============',
            '         Flight Time: 7.500000 s',
            '         Range: 1.500000 km',
            '         Maximum Altitude: 0.250000 km',
            '         Ascent Time: 3.000000 s',
            '         Descent Time: 4.500000 s',
            '         Heat Produced: 2.000000 kJ',
            '=============================================',
        ]

    def test_summary_mentions_launch(self, metrics):
        text = format_summary(metrics, 120, 35)
        assert '120.0 m/s' in text
        assert '1.500 km' in text

    def test_append_accumulates(self, metrics, tmp_path):
        log = tmp_path / 'output' / 'log.txt'
        append_report(metrics, str(log))
        append_report(metrics, str(log))
        assert log.read_text(encoding='utf-8').count(LOG_HEADER) == 2

    def test_clear_log(self, metrics, tmp_path):
        log = tmp_path / 'log.txt'
        append_report(metrics, str(log))
        clear_log(str(log))
        assert log.read_text(encoding='utf-8') == ''

    def test_clear_missing_log_creates_it(self, tmp_path):
        log = tmp_path / 'nested' / 'log.txt'
        clear_log(str(log))
        assert log.exists()


class TestVisualization:

    def test_plot_results(self, tmp_path):
        traj, _ = simulate(200.0, 40.0)
        path = tmp_path / 'velocity_position_curve.png'
        fig = plot_results(traj, save_path=str(path))
        assert len(fig.axes) == 3
        assert path.exists()
        plt.close(fig)

    def test_animation_written(self, tmp_path):
        traj, _ = simulate(200.0, 40.0)
        path = create_trajectory_animation(traj, save_path=str(tmp_path / 'anim.gif'),
                                           frames=5, trail_length=3)
        assert os.path.getsize(path) > 0

    def test_animation_single_sample(self, tmp_path):
        traj, _ = simulate(0.0, 45.0)
        path = create_trajectory_animation(traj, save_path=str(tmp_path / 'still.gif'),
                                           frames=5)
        assert os.path.exists(path)

    def test_ensure_output_dir(self, tmp_path):
        target = tmp_path / 'output' / 'images'
        assert ensure_output_dir(str(target)) == str(target)
        assert target.is_dir()


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
