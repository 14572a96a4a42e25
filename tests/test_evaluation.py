import pytest

from pon.errors import (
    PonArityError,
    PonInvalidSymbol,
    PonTypeError,
    PonUnboundSymbol,
)
from pon.evaluation.evaluator import evaluate
from pon.reader.parser import read
from pon.types.environment import Environment
from pon.types.nil import Nil
from pon.types.procedure import Procedure
from pon.types.symbol import Symbol, TRUE


# -----------------------------------------------------
# Atoms and symbols
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate([], env) == []


def test_symbol_lookup(env):
    env.define(Symbol("foo"), 5)
    assert evaluate(Symbol("foo"), env) == 5
    child = Environment(outer=env)
    assert evaluate(Symbol("foo"), child) == 5


def test_unbound_symbol(env):
    with pytest.raises(PonUnboundSymbol):
        evaluate(Symbol("not_defined"), env)


# -----------------------------------------------------
# Special forms
# -----------------------------------------------------

def test_quote_returns_wrapped_tail(run):
    assert run("(quote (1 2 3))") == [[1, 2, 3]]
    assert run("(quote a)") == [Symbol("a")]
    assert run("(quote (+ 1 2))") == [[Symbol("+"), 1, 2]]
    assert run("(quote a b)") == [Symbol("a"), Symbol("b")]


def test_quote_is_a_list(run):
    assert run("(list? (quote (1 2 3)))") == TRUE


def test_define_binds_locally_and_returns_value(run, env):
    assert run("(define foo 5)") == 5
    assert env.vars[Symbol("foo")] == 5
    assert run("foo") == 5


def test_define_evaluates_value(run):
    assert run("(define x (+ 1 2))") == 3
    assert run("x") == 3


def test_define_failure_leaves_no_binding(run, env):
    with pytest.raises(PonUnboundSymbol):
        run("(define x (+ y 1))")
    assert Symbol("x") not in env.vars


@pytest.mark.parametrize("source", ["(define)", "(define x)", "(define x 1 2)"])
def test_define_arity(run, source):
    with pytest.raises(PonArityError):
        run(source)


def test_define_requires_symbol(run):
    with pytest.raises(PonInvalidSymbol):
        run("(define 5 1)")


def test_set_updates_existing_binding(run):
    run("(define x 1)")
    assert run("(set! x 7)") == 7
    assert run("x") == 7


def test_set_unbound_fails(run, env):
    with pytest.raises(PonUnboundSymbol):
        run("(set! nope 1)")
    assert Symbol("nope") not in env.vars


def test_set_in_closure_mutates_ancestor(run, env):
    run("(define counter 0)")
    run("(define bump (lambda () (set! counter (+ counter 1))))")
    run("(bump)")
    run("(bump)")
    assert run("counter") == 2
    assert env.vars[Symbol("counter")] == 2


def test_set_failed_value_keeps_old_binding(run):
    run("(define x 1)")
    with pytest.raises(PonUnboundSymbol):
        run("(set! x missing)")
    assert run("x") == 1


def test_env_form_returns_current_environment(env):
    assert evaluate(read("(env)"), env) is env
    child = Environment(outer=env)
    assert evaluate(read("(env)"), child) is child


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(if #t 1 2)", 1),
        ("(if #f 1 2)", 2),
        ("(if (< 1 2) 10 20)", 10),
        ("(if (> 1 2) 10 20)", 20),
        # only #f is false
        ("(if 0 1 2)", 1),
        ("(if () 1 2)", 1),
        ("(if nil 1 2)", 1),
        ("(if (quote a) 1 2)", 1),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_without_alternative(run):
    assert run("(if #t 1)") == 1
    assert run("(if #f 1)") is Nil


def test_if_evaluates_only_taken_branch(run):
    assert run("(if #t 1 undefined-name)") == 1
    assert run("(if #f undefined-name 2)") == 2


@pytest.mark.parametrize("source", ["(if)", "(if #t)", "(if #t 1 2 3)"])
def test_if_arity(run, source):
    with pytest.raises(PonArityError):
        run(source)


def test_lambda_creates_procedure(run, env):
    proc = run("(lambda (x) (* x x))")
    assert isinstance(proc, Procedure)
    assert proc.formals == [Symbol("x")]
    assert proc.body == [Symbol("*"), Symbol("x"), Symbol("x")]
    assert proc.env is env


def test_lambda_application(run):
    assert run("((lambda (x) (* x x)) 4)") == 16
    assert run("((lambda (x y) (+ x y)) 3 4)") == 7
    assert run("((lambda () 42))") == 42


@pytest.mark.parametrize(
    "source, error",
    [
        ("(lambda (x))", PonArityError),
        ("(lambda (x) x x)", PonArityError),
        ("(lambda x x)", PonInvalidSymbol),
        ("(lambda (1) x)", PonInvalidSymbol),
    ]
)
def test_lambda_malformed(run, source, error):
    with pytest.raises(error):
        run(source)


def test_closure_captures_defining_environment(run):
    run("(define make-adder (lambda (n) (lambda (x) (+ x n))))")
    run("(define add5 (make-adder 5))")
    assert run("(add5 1)") == 6
    # a binding of n in a sibling frame does not leak into the closure
    assert run("((lambda (n) (add5 1)) 100)") == 6


def test_closure_outlives_creating_call(run):
    assert run("(((lambda (x) (lambda (y) (+ x y))) 5) 7)") == 12


def test_closure_sees_later_defines_in_captured_frame(run):
    run("(define f (lambda () later))")
    run("(define later 3)")
    assert run("(f)") == 3


def test_variable_shadowing(run):
    assert run("((lambda (x) ((lambda (x) (+ x 1)) 10)) 5)") == 11


def test_recursive_procedure(run):
    run("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))")
    assert run("(fact 5)") == 120
    assert run("(fact 20)") == 2432902008176640000


def test_missing_arguments_are_left_unbound(run):
    run("(define pair (lambda (a b) (list a b)))")
    assert run("((lambda (a b) a) 1)") == 1
    with pytest.raises(PonUnboundSymbol):
        run("(pair 1)")


def test_extra_arguments_are_dropped(run):
    assert run("((lambda (a) a) 1 2 3)") == 1


def test_begin_threads_environment(run):
    run("(define x 100)")
    assert run("(begin (set! x 1) (set! x (+ x 1)) (* x 2))") == 4
    assert run("x") == 2


def test_begin_returns_last_value(run):
    assert run("(begin 1 2 3)") == 3
    assert run("(begin (define a 10) (define b 20) (+ a b))") == 30


def test_empty_begin_is_nil(run):
    assert run("(begin)") is Nil


def test_special_forms_take_priority_over_bindings(run):
    run("(define if 1)")
    assert run("(if #f 1 2)") == 2


def test_apply_non_callable(run):
    with pytest.raises(PonTypeError):
        run("(1 2 3)")
    run("(define x 5)")
    with pytest.raises(PonTypeError):
        run("(x)")


def test_operator_position_is_evaluated(run):
    assert run("((if #t + -) 5 3)") == 8
    assert run("((if #f + -) 5 3)") == 2


def test_primitives_can_be_shadowed(run):
    run("(define car (lambda (xs) 99))")
    assert run("(car (list 1 2))") == 99
    run("(set! + -)")
    assert run("(+ 5 3)") == 2


def test_runaway_recursion_exhausts_stack(run):
    run("(define loop (lambda (n) (loop n)))")
    with pytest.raises(RecursionError):
        run("(loop 1)")
