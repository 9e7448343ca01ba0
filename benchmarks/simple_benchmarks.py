import sys
from timeit import timeit

from tzlang.builtins import register
from tzlang.config import get_recursion_limit
from tzlang.evaluation.evaluator import evaluate_program
from tzlang.reader.parser import parse
from tzlang.types.environment import Environment
from tzlang.types.values import FloatValue


def time_evaluator(code: str, rounds: int) -> float:
    """Time evaluation only: the program is parsed once and re-evaluated in a
    fresh global environment each round.
    """
    root = parse(code)

    def _run():
        evaluate_program(root, register(Environment(), natives=False))

    _run()  # warmup
    return timeit(_run, number=rounds)


def time_parser(code: str, rounds: int) -> float:
    parse(code)
    return timeit(lambda: parse(code), number=rounds)


# Environment lookup through a deep scope chain (no parsing or evaluation)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    root = Environment()
    root.define("answer", FloatValue(42.0))
    env = root
    for _ in range(n_envs):
        env = Environment(env)
    for _ in range(1000):
        env.lookup("answer")
    return timeit(lambda: env.lookup("answer"), number=n_lookups)


CLOSURE_APPLY_CODE = "((x, y) => { x + y })(1, 2)"

RECURSION_CODE = r"""
let fact = (n) => {
  if (n <= 1) { 1 } else { n * fact(n - 1) }
}
fact(50)
"""

LOOP_SUM_CODE = r"""
let i = 0
let total = 0
for (i < 500) {
  i = i + 1
  total = total + i
}
total
"""


def _print_pair(name: str, code: str, rounds: int) -> None:
    tparse = time_parser(code, rounds)
    teval = time_evaluator(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  parse: {tparse:.6f}s  |  evaluate: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_pair("closure application", CLOSURE_APPLY_CODE, rounds=20000)
    _print_pair("recursion (factorial)", RECURSION_CODE, rounds=500)
    _print_pair("for loop sum 1..500", LOOP_SUM_CODE, rounds=200)
