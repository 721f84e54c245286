import pytest

from tock.errors import ArgumentTypeError, ArityError, CapabilityError
from tock.host.sink import BufferedSink, StreamSink
from tock.interpreter import Interpreter
from tock.types.undefined import Undefined


# ------------------ cout ------------------

@pytest.mark.parametrize(
    "expr,line",
    [
        ("(list 1 \"a\" '(2 3))", "(1 a (2 3))"),
        ("2.5", "2.5"),
        ("(+ 2 2)", "4"),
        ("(< 1 2)", "true"),
        ("(> 1 2)", "false"),
        ("'sym", "sym"),
        ("nil", "()"),
        ("(car nil)", "undefined"),
        ('"plain text"', "plain text"),
    ]
)
def test_cout_renders_values(interp, sink, expr, line):
    interp.eval(f"(cout out {expr})")
    assert sink.lines("out") == [line]


def test_cout_returns_value(interp):
    assert interp.eval("(cout out (+ 1 2))") == 3


def test_cout_string_sink_id(interp, sink):
    interp.eval('(cout "log" 1) (cout log 2)')
    assert sink.lines("log") == ["1", "2"]
    assert sink.text("log") == "1\n2\n"


def test_cout_prints_function(interp, sink):
    interp.eval("(func f () 1) (cout out f)")
    assert sink.lines("out") == ["[function f]"]


def test_cout_in_loop_keeps_order(interp, sink):
    interp.eval("(def i 0) (while (< i 10) (cout out i) (set i (+ i 1)))")
    assert sink.lines("out") == [str(n) for n in range(10)]


def test_cout_without_sink():
    with pytest.raises(CapabilityError):
        Interpreter().eval("(cout out 1)")


def test_cout_sink_failure_is_capability_error():
    class BrokenSink:
        def write(self, sink_id, text):
            raise OSError("disk full")

    with pytest.raises(CapabilityError) as info:
        Interpreter(sink=BrokenSink()).eval("(cout out 1)")
    assert isinstance(info.value.__cause__, OSError)


def test_cout_rejects_computed_sink_id(interp):
    with pytest.raises(ArgumentTypeError):
        interp.eval("(cout (list 1) 1)")


def test_cout_arity(interp):
    with pytest.raises(ArityError):
        interp.eval("(cout out)")


def test_stream_sink(capsys):
    Interpreter(sink=StreamSink()).eval('(cout out "hello")')
    assert capsys.readouterr().out == "hello\n"


def test_stream_sink_with_ids(capsys):
    Interpreter(sink=StreamSink(show_ids=True)).eval('(cout out "hello")')
    assert capsys.readouterr().out == "[out] hello\n"


def test_errors_reported_to_error_sink():
    sink = BufferedSink()
    interp = Interpreter(sink=sink, error_sink="errors")
    with pytest.raises(ArgumentTypeError):
        interp.eval("(car 5)")
    assert sink.lines("errors") == ["Error: car expects a list, got float"]


# ------------------ fillRect ------------------

def test_fill_rect_with_color(interp, surface):
    assert interp.eval('(fillRect canvas 1 1 2 2 "#ff0000")') is Undefined
    assert surface.pixel("canvas", 1, 1) == (255, 0, 0, 255)
    assert surface.pixel("canvas", 2, 2) == (255, 0, 0, 255)
    assert surface.pixel("canvas", 3, 3) == (0, 0, 0, 0)
    assert surface.pixel("canvas", 0, 0) == (0, 0, 0, 0)


def test_fill_rect_keeps_fill_style(interp, surface):
    interp.eval('(fillRect canvas 0 0 1 1 "blue") (fillRect canvas 5 5 1 1)')
    assert surface.pixel("canvas", 5, 5) == (0, 0, 255, 255)


def test_fill_rect_default_black(interp, surface):
    interp.eval("(fillRect canvas 0 0 2 1)")
    assert surface.pixel("canvas", 1, 0) == (0, 0, 0, 255)


def test_fill_rect_computed_arguments(interp, surface):
    interp.eval("(def size 3) (def color \"#0f0\") (fillRect canvas (- size 1) 0 size size color)")
    assert surface.pixel("canvas", 4, 2) == (0, 255, 0, 255)
    assert surface.pixel("canvas", 5, 2) == (0, 0, 0, 0)


def test_fill_rect_in_loop(interp, surface):
    interp.eval("""
    (def x 0)
    (while (< x 10)
      (fillRect canvas x x 1 1 "white")
      (set x (+ x 1)))
    """)
    assert all(surface.pixel("canvas", n, n) == (255, 255, 255, 255) for n in range(10))
    assert surface.array("canvas")[:, :, 3].sum() == 10 * 255


def test_fill_rect_unknown_surface(interp):
    with pytest.raises(CapabilityError):
        interp.eval("(fillRect nowhere 0 0 1 1)")


def test_fill_rect_without_surface():
    with pytest.raises(CapabilityError):
        Interpreter().eval("(fillRect canvas 0 0 1 1)")


def test_fill_rect_requires_numbers(interp):
    with pytest.raises(ArgumentTypeError):
        interp.eval('(fillRect canvas "a" 0 1 1)')


def test_fill_rect_arity(interp):
    with pytest.raises(ArityError):
        interp.eval("(fillRect canvas 0 0 1)")


class FullDisk:
    def write(self, sink_id, text):
        raise OSError("disk full")


def test_failing_error_sink_keeps_run_error(caplog):
    interp = Interpreter(sink=FullDisk(), error_sink="errors")
    with pytest.raises(CapabilityError) as info:
        interp.eval("(cout out 1)")
    assert isinstance(info.value.__cause__, OSError)
    assert "Could not report run error" in caplog.text
