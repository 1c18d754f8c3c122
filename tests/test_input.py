import pytest

from discoscene.input import InputHandler


class FakeWindow:
    def __init__(self):
        self.handlers = []

    def push_handlers(self, handler):
        self.handlers.append(handler)


@pytest.fixture
def window():
    return FakeWindow()


def test_handler_registers_with_window(window):
    handler = InputHandler(window)
    assert window.handlers == [handler]


def test_single_click_fires_once_while_held(window):
    handler = InputHandler(window)
    calls = []
    handler.add_key_callback(66, False, calls.append)
    handler.on_key_press(66, 0)
    handler.process_input()
    handler.process_input()
    handler.process_input()
    assert calls == [window]


def test_release_rearms_single_click(window):
    handler = InputHandler(window)
    calls = []
    handler.add_key_callback(66, False, calls.append)
    handler.on_key_press(66, 0)
    handler.process_input()
    handler.on_key_release(66, 0)
    handler.process_input()
    handler.on_key_press(66, 0)
    handler.process_input()
    assert len(calls) == 2


def test_holdable_fires_every_frame(window):
    handler = InputHandler(window)
    calls = []
    handler.add_key_callback(32, True, calls.append)
    handler.on_key_press(32, 0)
    for _ in range(3):
        handler.process_input()
    assert len(calls) == 3


def test_unpressed_key_does_not_fire(window):
    handler = InputHandler(window)
    calls = []
    handler.add_key_callback(80, False, calls.append)
    handler.process_input()
    handler.on_key_press(81, 0)
    handler.process_input()
    assert calls == []


def test_callbacks_run_in_key_order(window):
    handler = InputHandler(window)
    order = []
    handler.add_key_callback(80, False, lambda w: order.append(80))
    handler.add_key_callback(66, False, lambda w: order.append(66))
    handler.on_key_press(80, 0)
    handler.on_key_press(66, 0)
    handler.process_input()
    assert order == [66, 80]


def test_reregistering_replaces_callback(window):
    handler = InputHandler(window)
    first, second = [], []
    handler.add_key_callback(66, False, first.append)
    handler.add_key_callback(66, False, second.append)
    handler.on_key_press(66, 0)
    handler.process_input()
    assert first == []
    assert second == [window]


def test_release_of_unknown_key_is_harmless(window):
    handler = InputHandler(window)
    calls = []
    handler.add_key_callback(66, True, calls.append)
    handler.on_key_release(99, 0)
    handler.on_key_press(66, 0)
    handler.process_input()
    assert calls == [window]