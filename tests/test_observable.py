import unittest

from chembalance.observable import DerivedValue, ObservableValue, ReadOnlyObservable


def _non_negative(value):
    if value < 0:
        raise ValueError("negative")


class TestObservableValue(unittest.TestCase):
    def test_notifies_only_on_change(self):
        observable = ObservableValue(1)
        calls = []
        observable.subscribe(lambda new, old: calls.append((new, old)))

        observable.value = 2
        observable.value = 2
        self.assertEqual(calls, [(2, 1)])

    def test_validator_refuses_write(self):
        observable = ObservableValue(0, validator=_non_negative)
        with self.assertRaises(ValueError):
            observable.value = -1
        self.assertEqual(observable.value, 0)

    def test_value_is_read_like_a_read_only_observable(self):
        self.assertIs(ObservableValue.value.fget, ReadOnlyObservable.value.fget)
        self.assertIsNone(ReadOnlyObservable.value.fset)
        observable = ObservableValue(4)
        self.assertEqual(observable.value, ReadOnlyObservable.value.fget(observable))

    def test_reset_uses_current_initial_value(self):
        observable = ObservableValue(0)
        observable.value = 3
        observable.initial_value = 1
        self.assertEqual(observable.value, 3)
        observable.reset()
        self.assertEqual(observable.value, 1)

    def test_listener_misuse(self):
        observable = ObservableValue(0)

        def listener(new, old):
            pass

        observable.subscribe(listener)
        with self.assertRaises(ValueError):
            observable.subscribe(listener)
        observable.unsubscribe(listener)
        with self.assertRaises(ValueError):
            observable.unsubscribe(listener)

    def test_independent_listeners(self):
        observable = ObservableValue(0)
        first, second = [], []

        def on_first(new, old):
            first.append(new)

        observable.subscribe(on_first)
        observable.subscribe(lambda new, old: second.append(new))
        observable.value = 1
        observable.unsubscribe(on_first)
        observable.value = 2

        self.assertEqual(first, [1])
        self.assertEqual(second, [1, 2])


class TestDerivedValue(unittest.TestCase):
    def test_recomputes_on_dependency_change(self):
        a = ObservableValue(1)
        b = ObservableValue(2)
        total = DerivedValue([a, b], lambda: a.value + b.value)
        self.assertEqual(total.value, 3)

        a.value = 10
        self.assertEqual(total.value, 12)

    def test_dispose_detaches(self):
        a = ObservableValue(1)
        doubled = DerivedValue([a], lambda: a.value * 2)
        doubled.dispose()
        a.value = 5
        self.assertEqual(doubled.value, 2)
        self.assertFalse(a.has_listener(doubled._on_dependency_changed))


if __name__ == '__main__':
    unittest.main()
