from timeit import timeit

from lisplet.config import Scoping
from lisplet.interpreter import Interpreter
from lisplet.types.symbol import Symbol
from lisplet.types.environment import Environment
from lisplet.reader.parser import parse
from lisplet.evaluation.evaluator import evaluate


def time_interpreter(code: str, rounds: int, scoping: Scoping) -> float:
    """Time evaluation only: `code` is parsed once and the same AST is
    evaluated repeatedly against one session's global environment.
    """
    itp = Interpreter(scoping=scoping)
    itp.eval(FUNCTIONS)
    expr = parse(code)
    # Warmup
    evaluate(expr, itp.env, itp.scoping)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env, itp.scoping), number=rounds)


def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.find(key)
    # Timed
    return timeit(lambda: env.find(key), number=n_lookups)


FUNCTIONS = r"""
(defun add (a b) (+ a b))
(defun fact (n) (if (<= n 1) 1 (* n (fact (- n 1)))))
(defun fib (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2)))))
(defun sqrt-sum (n) (if (<= n 0) 0 (+ (sqrt n) (sqrt-sum (- n 1)))))
"""

WORKLOADS = [
    ("function application", "(add 1 2)", 20000),
    ("recursion (factorial 100)", "(fact 100)", 500),
    ("tree recursion (fib 15)", "(fib 15)", 20),
    ("math builtins (sqrt-sum 200)", "(sqrt-sum 200)", 200),
]


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    for name, code, rounds in WORKLOADS:
        tdyn = time_interpreter(code, rounds, Scoping.DYNAMIC)
        tlex = time_interpreter(code, rounds, Scoping.LEXICAL)
        print(f"Benchmark: {name}")
        print(f"  dynamic: {tdyn:.6f}s  |  lexical: {tlex:.6f}s  [rounds={rounds}]")
