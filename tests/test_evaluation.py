import pytest

from tale import errors
from tale.evaluation.evaluator import evaluate
from tale.interpreter import parse_eval
from tale.types import Closure, Environment, Primitive, Symbol


# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

@pytest.mark.parametrize("literal", [0.0, 1.5, -3.0, True, False])
def test_self_evaluating_literals(env, literal):
    assert evaluate(literal, env) is literal
    assert evaluate(literal, Environment()) is literal


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate(Symbol("x"), env) == 42.0
    assert isinstance(evaluate(Symbol("+"), env), Primitive)


def test_unbound_symbol_names_the_symbol(env):
    with pytest.raises(errors.TaleUnboundSymbol) as ex:
        evaluate(Symbol("not-defined"), env)
    assert "not-defined" in str(ex.value)
    assert str(ex.value) == "Unexpected symbol 'not-defined'"
    assert isinstance(ex.value, errors.TaleGenericError)


@pytest.mark.parametrize("value", [Primitive("noop", lambda args: 0.0), Closure([], 1.0)])
def test_function_values_are_not_expressions(env, value):
    with pytest.raises(errors.TaleGenericError, match="unexpected form"):
        evaluate(value, env)


def test_empty_list_is_an_error(env):
    with pytest.raises(errors.TaleGenericError, match="expected a non-empty list"):
        parse_eval("()", env)


@pytest.mark.parametrize("source", ["(1 2)", "(true)", "((+ 1 1) 3)"])
def test_head_must_be_a_function(env, source):
    with pytest.raises(errors.TaleTypeError, match="first form must be a function"):
        parse_eval(source, env)


# -----------------------------------------------------
# def
# -----------------------------------------------------

def test_def_binds_and_returns_symbol(env):
    assert parse_eval("(def x (+ 1 2))", env) == Symbol("x")
    assert parse_eval("x", env) == 3.0


def test_def_overwrites(env):
    parse_eval("(def x 1)", env)
    parse_eval("(def x (+ x 1))", env)
    assert parse_eval("x", env) == 2.0


def test_def_can_shadow_primitive(env):
    parse_eval("(def + -)", env)
    assert parse_eval("(+ 10 4)", env) == 6.0


@pytest.mark.parametrize(
    "source,error,message",
    [
        ("(def)", errors.TaleArityError, "expected first form"),
        ("(def 1 2)", errors.TaleTypeError, "expected first form to be a symbol"),
        ("(def (x) 2)", errors.TaleTypeError, "expected first form to be a symbol"),
        ("(def x)", errors.TaleArityError, "expected second form"),
        ("(def x 1 2)", errors.TaleArityError, "def can only have two forms "),
    ]
)
def test_def_errors(env, source, error, message):
    with pytest.raises(error) as ex:
        parse_eval(source, env)
    assert str(ex.value) == message
    assert env.lookup("x") is None


def test_def_value_error_leaves_env_untouched(env):
    with pytest.raises(errors.TaleUnboundSymbol):
        parse_eval("(def x y)", env)
    assert env.lookup("x") is None


# -----------------------------------------------------
# if
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", 1.0),
        ("(if false 1 2)", 2.0),
        ("(if (< 1 2) (+ 1 1) 0)", 2.0),
        ("(if (= 1 2) 0 (- 5 1))", 4.0),
        ("(if true 1 2 ignored)", 1.0),
    ]
)
def test_if(env, source, expected):
    assert parse_eval(source, env) == expected


def test_if_only_evaluates_taken_branch(env):
    assert parse_eval("(if true 1 undefined-symbol)", env) == 1.0
    assert parse_eval("(if false (def x 1) 2)", env) == 2.0
    assert env.lookup("x") is None


@pytest.mark.parametrize(
    "source,message",
    [
        ("(if 1 2 3)", "unexpected test form='1'"),
        ("(if (+ 1 0) 2 3)", "unexpected test form='(+,1,0)'"),
        ("(if + 2 3)", "unexpected test form='+'"),
    ]
)
def test_if_test_must_be_boolean(env, source, message):
    with pytest.raises(errors.TaleTypeError) as ex:
        parse_eval(source, env)
    assert str(ex.value) == message


@pytest.mark.parametrize(
    "source,message",
    [
        ("(if)", "expected test form"),
        ("(if true)", "expected form idx=1"),
        ("(if false 1)", "expected form idx=2"),
    ]
)
def test_if_missing_forms(env, source, message):
    with pytest.raises(errors.TaleArityError) as ex:
        parse_eval(source, env)
    assert str(ex.value) == message


# -----------------------------------------------------
# fn
# -----------------------------------------------------

def test_fn_builds_closure_without_evaluating(env):
    value = parse_eval("(fn (x) (undefined x))", env)
    assert isinstance(value, Closure)
    assert value.params == [Symbol("x")]
    assert value.body == [Symbol("undefined"), Symbol("x")]


def test_fn_application(env):
    assert parse_eval("((fn (x) (+ x 1)) 5)", env) == 6.0
    assert parse_eval("((fn () 7))", env) == 7.0
    assert parse_eval("((fn (a b c) (- a b c)) 10 2 3)", env) == 5.0


def test_named_function(env):
    parse_eval("(def inc (fn (x) (+ x 1)))", env)
    assert parse_eval("(inc (inc 1))", env) == 3.0


def test_recursive_function(env):
    parse_eval("(def fib (fn (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2))))))", env)
    assert parse_eval("(fib 10)", env) == 55.0


@pytest.mark.parametrize(
    "source,message",
    [
        ("((fn (x) (+ x 1)))", "expected 1 arguments, got 0"),
        ("((fn (x) (+ x 1)) 1 2)", "expected 1 arguments, got 2"),
        ("((fn () 1) 1)", "expected 0 arguments, got 1"),
    ]
)
def test_closure_arity(env, source, message):
    with pytest.raises(errors.TaleArityError) as ex:
        parse_eval(source, env)
    assert str(ex.value) == message


def test_arity_checked_before_arguments_are_evaluated(env):
    with pytest.raises(errors.TaleArityError):
        parse_eval("((fn (x) x) undefined-a undefined-b)", env)


@pytest.mark.parametrize(
    "source,message",
    [
        ("(fn)", "expected args form"),
        ("(fn (x))", "expected second form"),
        ("(fn (x) 1 2)", "fn definition can only have two forms "),
    ]
)
def test_fn_errors(env, source, message):
    with pytest.raises(errors.TaleArityError) as ex:
        parse_eval(source, env)
    assert str(ex.value) == message


def test_params_are_checked_only_when_called(env):
    parse_eval("(def bad (fn 5 1))", env)
    parse_eval("(def worse (fn (1) 1))", env)
    with pytest.raises(errors.TaleTypeError, match="expected args form to be a list"):
        parse_eval("(bad)", env)
    with pytest.raises(errors.TaleTypeError, match="expected symbols in the argument list"):
        parse_eval("(worse 2)", env)


def test_arguments_evaluated_left_to_right_in_caller_env(env):
    parse_eval("(def x 1)", env)
    # The first argument rebinds x in the caller env before the second is read
    assert parse_eval("((fn (a b) b) (def x 10) x)", env) == 10.0
    assert parse_eval("x", env) == 10.0


def test_closure_body_is_a_single_expression(env):
    with pytest.raises(errors.TaleArityError):
        parse_eval("(fn (x) (def y x) y)", env)


def test_deep_recursion_is_a_host_error(env):
    parse_eval("(def loop (fn (n) (loop n)))", env)
    with pytest.raises(RecursionError):
        parse_eval("(loop 1)", env)


def test_parse_eval_ignores_trailing_forms(env):
    assert parse_eval("(def x 1) (def y 2)", env) == Symbol("x")
    assert env.lookup("y") is None


def test_eval_all_runs_every_form(interp):
    results = interp.eval_all("(def x 2) (def y (+ x 1)) (- y x)")
    assert results == [Symbol("x"), Symbol("y"), 1.0]
    assert interp.eval_all("") == []


def test_eval_all_stops_at_first_error(interp):
    with pytest.raises(errors.TaleUnboundSymbol):
        interp.eval_all("(def a 1) (missing) (def b 2)")
    assert interp.eval("a") == 1.0
    assert interp.env.lookup("b") is None
