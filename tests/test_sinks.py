from app.sinks import ConsoleSink, NullSink
from control.kinematics import velocity_from_motion


def test_console_sink_throttles_output():
    now = [0.0]
    lines = []
    sink = ConsoleSink(interval_s=0.5, clock=lambda: now[0], out=lines.append)

    cmd = velocity_from_motion(0.4, 0.0)
    sink.publish(cmd)
    now[0] = 0.2
    sink.publish(cmd)
    now[0] = 0.6
    sink.publish(cmd)

    assert lines == [
        "[DEBUG] cmd linear.x=+0.40 angular.z=+0.000",
        "[DEBUG] cmd linear.x=+0.40 angular.z=+0.000",
    ]


def test_null_sink_accepts_anything():
    sink = NullSink()
    sink.publish(velocity_from_motion(1.0, 10.0))
    sink.close()
