# -*- coding: utf-8 -*-
"""
Functional tests for TemplateRenderer.

• Echo / counter scenarios from the package documentation.
• Error propagation: unknown names, failing functions, malformed markers.
• Registry management between renders (append / replace / remove).
"""
from __future__ import annotations

import unittest
from typing import List, Tuple

from funcytpl import (
    FunctionPlaceholder,
    Literal,
    MalformedMarkerError,
    Placeholder,
    PlaceholderFunctionError,
    RenderError,
    TemplateRenderer,
    TemplateRendererProtocol,
    UnknownPlaceholderError,
    renderer_factory,
)


# --------------------------------------------------------------------------- #
#  Placeholder functions                                                      #
# --------------------------------------------------------------------------- #
class Echo:
    def placeholder_fn_handler(self, name: str, arg: str) -> str:
        return arg


class Counter:
    def __init__(self, start: int = 0) -> None:
        self.value = start

    def placeholder_fn_handler(self, name: str, arg: str) -> str:
        self.value += 1
        return str(self.value)


class Recorder:
    """Records every call; answers with the placeholder name."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def placeholder_fn_handler(self, name: str, arg: str) -> str:
        self.calls.append((name, arg))
        return name.upper()


class RetErr:
    def placeholder_fn_handler(self, name: str, arg: str) -> str:
        raise ValueError("test error")


# --------------------------------------------------------------------------- #
#  1. Rendering                                                               #
# --------------------------------------------------------------------------- #
class RenderTests(unittest.TestCase):
    def test_echo_function(self) -> None:
        tr = TemplateRenderer.with_template("<!$ echo test>")
        tr.set_placeholder_fn("echo", Echo())
        self.assertEqual(tr.render(), "test")

        tr.set_template("<!$ echo test with spaces> and extra text")
        self.assertEqual(tr.render(), "test with spaces and extra text")

    def test_argument_passthrough(self) -> None:
        tr = TemplateRenderer.with_template("<!$ echo Hello>, World!")
        tr.set_placeholder_fn("echo", Echo())
        self.assertEqual(tr.render(), "Hello, World!")

    def test_counter_runs_in_template_order(self) -> None:
        tr = TemplateRenderer.with_template("<!$ counter> <!$ counter> <!$ counter>")
        tr.set_placeholder_fn("counter", Counter(0))
        self.assertEqual(tr.render(), "1 2 3")

    def test_counter_state_survives_renders(self) -> None:
        counter = Counter(0)
        tr = TemplateRenderer.with_template("<!$ counter> <!$ counter>")
        tr.set_placeholder_fn("counter", counter)
        self.assertEqual(tr.render(), "1 2")
        self.assertEqual(tr.render(), "3 4")
        self.assertEqual(counter.value, 4)

    def test_plain_callables_are_accepted(self) -> None:
        tr = TemplateRenderer.with_template("[<!$ upper shout>] [<!$ lower QUIET>]")
        tr.set_placeholder_fn("upper", lambda name, arg: arg.upper())
        tr.set_placeholder_fn("lower", FunctionPlaceholder(lambda name, arg: arg.lower()))
        self.assertEqual(tr.render(), "[SHOUT] [quiet]")

    def test_one_object_serves_several_names(self) -> None:
        rec = Recorder()
        tr = TemplateRenderer.with_template("<!$ a 1>-<!$ b>-<!$ a 2>")
        tr.append_placeholders({"a": rec, "b": rec})
        self.assertEqual(tr.render(), "A-B-A")
        self.assertEqual(rec.calls, [("a", "1"), ("b", ""), ("a", "2")])

    def test_text_without_markers_is_unchanged(self) -> None:
        for text in ("", "plain", "a > b", "<! $ nope>", "line1\nline2\n"):
            with self.subTest(text=text):
                self.assertEqual(TemplateRenderer.with_template(text).render(), text)

    def test_empty_renderer(self) -> None:
        self.assertEqual(TemplateRenderer().render(), "")

    def test_pure_functions_are_idempotent(self) -> None:
        tr = TemplateRenderer.with_template("x <!$ echo a> y <!$ echo b> z")
        tr.set_placeholder_fn("echo", Echo())
        self.assertEqual(tr.render(), tr.render())

    def test_output_interleaves_literals_and_results(self) -> None:
        text = "head <!$ echo one> mid <!$ echo two> tail"
        tr = TemplateRenderer.with_template(text)
        tr.set_placeholder_fn("echo", Echo())
        expected = "".join(
            seg.text if isinstance(seg, Literal) else seg.argument for seg in tr.segments()
        )
        self.assertEqual(tr.render(), expected)
        self.assertEqual(expected, "head one mid two tail")

    def test_segments_follow_template_changes(self) -> None:
        tr = TemplateRenderer.with_template("<!$ a>")
        self.assertEqual([s.name for s in tr.segments()], ["a"])
        tr.set_template("<!$ b> <!$ c>")
        self.assertEqual(
            [s.name for s in tr.segments() if isinstance(s, Placeholder)], ["b", "c"]
        )

    def test_satisfies_protocol(self) -> None:
        self.assertIsInstance(TemplateRenderer(), TemplateRendererProtocol)

    def test_repr_lists_function_names(self) -> None:
        tr = TemplateRenderer.with_template("<!$ echo x>")
        tr.set_placeholder_fn("echo", Echo())
        self.assertIn("'echo'", repr(tr))
        self.assertIn("<!$ echo x>", repr(tr))


# --------------------------------------------------------------------------- #
#  2. Errors                                                                  #
# --------------------------------------------------------------------------- #
class RenderErrorTests(unittest.TestCase):
    def test_nonexistent_function(self) -> None:
        tr = TemplateRenderer.with_template("<!$ nonexistent>")
        with self.assertRaises(UnknownPlaceholderError) as cm:
            tr.render()
        self.assertEqual(cm.exception.name, "nonexistent")
        self.assertEqual(cm.exception.placeholder.start, 0)
        self.assertIn("nonexistent", str(cm.exception))

    def test_function_returning_err(self) -> None:
        tr = TemplateRenderer.with_template("<!$ err>")
        tr.set_placeholder_fn("err", RetErr())
        with self.assertRaises(PlaceholderFunctionError) as cm:
            tr.render()
        err = cm.exception
        self.assertEqual(err.name, "err")
        self.assertEqual(err.message, "test error")
        self.assertIsInstance(err.__cause__, ValueError)
        self.assertEqual(str(err), "Error in placeholder function 'err' at line 1, col 1: test error")

    def test_error_stops_dispatch(self) -> None:
        rec = Recorder()
        tr = TemplateRenderer.with_template("<!$ a> <!$ missing> <!$ a>")
        tr.set_placeholder_fn("a", rec)
        with self.assertRaises(UnknownPlaceholderError):
            tr.render()
        self.assertEqual(rec.calls, [("a", "")])

    def test_malformed_marker_fails_before_any_dispatch(self) -> None:
        rec = Recorder()
        tr = TemplateRenderer.with_template("<!$ foo> <!$ foo")
        tr.set_placeholder_fn("foo", rec)
        with self.assertRaises(MalformedMarkerError):
            tr.render()
        self.assertEqual(rec.calls, [])

    def test_malformed_marker_without_functions(self) -> None:
        with self.assertRaises(MalformedMarkerError):
            TemplateRenderer.with_template("<!$ foo").render()

    def test_non_string_result_is_an_error(self) -> None:
        tr = TemplateRenderer.with_template("<!$ num>")
        tr.set_placeholder_fn("num", lambda name, arg: 42)
        with self.assertRaises(PlaceholderFunctionError) as cm:
            tr.render()
        self.assertIn("int", str(cm.exception))

    def test_all_errors_share_base_class(self) -> None:
        for text in ("<!$ x", "<!$ x>"):
            with self.subTest(text=text):
                with self.assertRaises(RenderError):
                    TemplateRenderer.with_template(text).render()

    def test_rerender_after_registry_fix(self) -> None:
        tr = TemplateRenderer.with_template("<!$ echo ok>")
        with self.assertRaises(UnknownPlaceholderError):
            tr.render()
        tr.set_placeholder_fn("echo", Echo())
        self.assertEqual(tr.render(), "ok")

    def test_failing_lazy_builder_is_a_function_error(self) -> None:
        def builder():
            raise RuntimeError("boom")

        tr = TemplateRenderer.with_template("x <!$ lazy>")
        tr.registry.register_lazy("lazy", builder=builder)
        with self.assertRaises(PlaceholderFunctionError) as cm:
            tr.render()
        err = cm.exception
        self.assertEqual(err.name, "lazy")
        self.assertEqual((err.position.line, err.position.col), (1, 3))
        self.assertIn("boom", str(err))
        self.assertIsInstance(err.__cause__, RuntimeError)

    def test_lazy_builder_returning_non_function_is_a_function_error(self) -> None:
        tr = TemplateRenderer.with_template("<!$ lazy>")
        tr.registry.register_lazy("lazy", builder=lambda: 42)
        with self.assertRaises(PlaceholderFunctionError) as cm:
            tr.render()
        self.assertIsInstance(cm.exception.__cause__, TypeError)
        self.assertIn("int", str(cm.exception))


# --------------------------------------------------------------------------- #
#  3. Registration                                                            #
# --------------------------------------------------------------------------- #
class RegistrationTests(unittest.TestCase):
    def test_replace_returns_previous(self) -> None:
        tr = TemplateRenderer.with_template("<!$ f>")
        first = Counter(10)
        self.assertIsNone(tr.set_placeholder_fn("f", first))
        self.assertIs(tr.set_placeholder_fn("f", Counter(0)), first)
        self.assertEqual(tr.render(), "1")

    def test_set_placeholders_overwrites(self) -> None:
        tr = TemplateRenderer.with_template("<!$ a>")
        tr.set_placeholder_fn("a", Echo())
        tr.set_placeholders({"b": Echo()})
        with self.assertRaises(UnknownPlaceholderError):
            tr.render()

    def test_remove_placeholder_fn(self) -> None:
        tr = TemplateRenderer.with_template("<!$ a>")
        echo = Echo()
        tr.set_placeholder_fn("a", echo)
        self.assertIs(tr.remove_placeholder_fn("a"), echo)
        self.assertIsNone(tr.remove_placeholder_fn("a"))

    def test_invalid_names_rejected(self) -> None:
        tr = TemplateRenderer()
        for name in ("", "two words", "a>b", "tab\tname"):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    tr.set_placeholder_fn(name, Echo())

    def test_non_callable_rejected(self) -> None:
        with self.assertRaises(TypeError):
            TemplateRenderer().set_placeholder_fn("x", "not a function")

    def test_names_are_case_sensitive(self) -> None:
        tr = TemplateRenderer.with_template("<!$ Echo hi>")
        tr.set_placeholder_fn("echo", Echo())
        with self.assertRaises(UnknownPlaceholderError):
            tr.render()


def test_renderer_factory_with_placeholders():
    tr = renderer_factory("<!$ echo hi>!", placeholders={"echo": Echo()})
    assert tr.render() == "hi!"


if __name__ == "__main__":
    unittest.main()
