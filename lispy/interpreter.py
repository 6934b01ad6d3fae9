from __future__ import annotations

import logging
from pathlib import Path

from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import evaluate
from lispy.reader.importer import read
from lispy.reader.parser import parse, REGEX_TAG
from lispy.types import Environment, Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Wires the reader, importer and evaluator around one Environment.
    Definitions persist across calls.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env = env

    def eval(self, code: str) -> Value:
        """Evaluate a whole input as one S-expression, as the prompt does.

        `+ 1 2` and `(+ 1 2)` both evaluate to 3.
        """
        value = read(parse(code))
        logger.debug("eval %r", value)
        return evaluate(value, self.env)

    def eval_each(self, code: str) -> list[Value]:
        """Evaluate every top-level expression separately, in order."""
        root = parse(code)
        results: list[Value] = []
        for node in root.children:
            if node.tag == REGEX_TAG:
                continue
            value = read(node)
            logger.debug("eval %r", value)
            results.append(evaluate(value, self.env))
        return results

    def load(self, path: str | Path) -> list[Value]:
        logger.debug("loading %s", path)
        return self.eval_each(Path(path).read_text(encoding="utf-8"))
