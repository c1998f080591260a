from trialkit.timer import Timer


class FakeClock:
    def __init__(self, *readings):
        self.readings = list(readings)

    def __call__(self):
        return self.readings.pop(0)


def test_elapsed_minutes_roll_over():
    timer = Timer(clock=FakeClock(0.0, 125.125))
    assert timer.elapsed() == "00:02:05.125"


def test_elapsed_zero():
    timer = Timer(clock=FakeClock(5.0, 5.0))
    assert timer.elapsed() == "00:00:00.000"


def test_elapsed_hours_minutes_seconds():
    timer = Timer(clock=FakeClock(0.0, 3723.5))
    assert timer.elapsed() == "01:02:03.500"


def test_print_elapsed(capsys):
    timer = Timer(clock=FakeClock(0.0, 0.0))
    timer.print_elapsed()
    assert capsys.readouterr().out == "Elapsed time: 00:00:00.000\n"