import math

import pytest

from my_2d_robot.errors import RecorderClosedError, WriteFailure
from my_2d_robot.recorder import RecorderState, SampleRecorder
from my_2d_robot.records import load_records


class ShutdownSpy:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_two_sample_session(make_config):
    config = make_config(data_point_count=2)
    shutdown = ShutdownSpy()
    recorder = SampleRecorder(config, on_quota_reached=shutdown)

    first = recorder.on_sample(0.0, 0.0)
    assert first.position == pytest.approx((2.0, 0.0))
    assert recorder.state is RecorderState.ACTIVE
    assert shutdown.calls == 0

    second = recorder.on_sample(math.pi / 2, 0.0)
    assert second.position.x == pytest.approx(0.0, abs=1e-12)
    assert second.position.y == pytest.approx(2.0)
    assert recorder.state is RecorderState.TERMINAL
    assert shutdown.calls == 1

    saved = load_records(config.output_path)
    assert saved == [first, second]
    assert [(r.angle1, r.angle2) for r in saved] == [(0.0, 0.0), (math.pi / 2, 0.0)]


def test_file_is_rewritten_after_every_sample(make_config):
    config = make_config(data_point_count=5)
    recorder = SampleRecorder(config)

    for count, angle in enumerate([0.1, 0.2, 0.3], start=1):
        recorder.on_sample(angle, -angle)
        saved = load_records(config.output_path)
        assert len(saved) == count == recorder.received_count
        assert [r.angle1 for r in saved] == pytest.approx([0.1, 0.2, 0.3][:count])

    with open(config.output_path) as f:
        assert f.read() == recorder.output_text


def test_raw_angles_are_recorded_before_offset(make_config):
    config = make_config(Theta1_offset=90.0, data_point_count=1)
    recorder = SampleRecorder(config)

    record = recorder.on_sample(math.pi / 2, 0.0)

    assert (record.angle1, record.angle2) == (math.pi / 2, 0.0)
    assert record.position == pytest.approx((2.0, 0.0), abs=1e-12)


def test_quota_of_one_terminates_after_first_sample(make_config):
    shutdown = ShutdownSpy()
    recorder = SampleRecorder(make_config(data_point_count=1), on_quota_reached=shutdown)

    recorder.on_sample(0.5, 0.5)

    assert recorder.is_terminal
    assert shutdown.calls == 1


def test_samples_after_quota_are_rejected(make_config):
    config = make_config(data_point_count=1)
    shutdown = ShutdownSpy()
    recorder = SampleRecorder(config, on_quota_reached=shutdown)
    recorder.on_sample(0.5, 0.5)
    text = recorder.output_text

    for _ in range(3):
        with pytest.raises(RecorderClosedError):
            recorder.on_sample(1.0, 1.0)

    assert recorder.received_count == 1
    assert len(recorder.records) == 1
    assert recorder.output_text == text
    assert len(load_records(config.output_path)) == 1
    assert shutdown.calls == 1


def test_write_failure_keeps_sample_and_next_write_recovers(make_config, tmp_path):
    output_dir = tmp_path / 'missing'
    config = make_config(output_path=output_dir / 'output.yaml', data_point_count=3)
    recorder = SampleRecorder(config)

    with pytest.raises(WriteFailure) as excinfo:
        recorder.on_sample(0.0, 0.0)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert recorder.received_count == 1
    assert len(recorder.records) == 1
    assert recorder.write_pending
    assert recorder.state is RecorderState.ACTIVE

    output_dir.mkdir()
    recorder.on_sample(0.1, 0.1)

    assert not recorder.write_pending
    saved = load_records(config.output_path)
    assert [r.angle1 for r in saved] == [0.0, 0.1]


def test_write_failure_on_last_sample_still_terminates(make_config, tmp_path):
    output_dir = tmp_path / 'missing'
    config = make_config(output_path=output_dir / 'output.yaml', data_point_count=1)
    shutdown = ShutdownSpy()
    recorder = SampleRecorder(config, on_quota_reached=shutdown)

    with pytest.raises(WriteFailure):
        recorder.on_sample(0.0, 0.0)

    assert recorder.is_terminal
    assert shutdown.calls == 1
    assert recorder.write_pending

    output_dir.mkdir()
    recorder.flush()

    assert len(load_records(config.output_path)) == 1
