import pytest

from amoebot.metric import Count, Measure


class Constant(Measure):
    def __init__(self, name, freq, value):
        super().__init__(name, freq)
        self.value = value

    def calculate(self):
        return self.value


def test_count_starts_empty():
    c = Count("# Moves")
    assert c.name == "# Moves"
    assert c.value == 0
    assert c.history == []


def test_record_defaults_to_one():
    c = Count("x")
    c.record()
    c.record()
    assert c.value == 2


def test_record_many():
    c = Count("x")
    c.record(2)
    c.record(5)
    assert c.value == 7


def test_record_negative_raises():
    with pytest.raises(ValueError):
        Count("x").record(-1)


def test_measure_is_abstract():
    with pytest.raises(TypeError):
        Measure("m", 1)


def test_measure_subclass_calculates():
    m = Constant("ratio", 3, 0.25)
    Measure.__init__(m, "ratio", 3)
    assert m.name == "ratio"
    assert m.freq == 3
    assert m.calculate() == 0.25
    assert m.history == []


def test_measure_zero_frequency_raises():
    m = Constant("m", 1, 1.0)
    with pytest.raises(ValueError):
        Measure.__init__(m, "m", 0)