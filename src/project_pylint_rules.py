"""Custom pylint rules for project typing and type-dispatch policy."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from astroid import nodes
from pylint.checkers import BaseChecker
from pylint.lint import PyLinter


_MESSAGE_PREFER_OPTIONAL = "prefer-optional"
_MESSAGE_NO_OBJECT_ANNOTATION = "no-object-annotation"
_MESSAGE_INT_CHECK_BEFORE_BOOL = "int-check-before-bool"


class ProjectRulesChecker(BaseChecker):
    """Project-specific AST checks."""

    name = "project-rules"

    msgs = {
        "C9501": (
            "Use Optional[T] instead of T | None in annotations",
            _MESSAGE_PREFER_OPTIONAL,
            "Project style requires Optional[T] for nullable annotations.",
        ),
        "C9502": (
            "Avoid object in type annotations; use a more specific type",
            _MESSAGE_NO_OBJECT_ANNOTATION,
            "Project style avoids object annotations; dynamic values are annotated Any.",
        ),
        "W9503": (
            "isinstance(%s, int) is tested before isinstance(%s, bool)",
            _MESSAGE_INT_CHECK_BEFORE_BOOL,
            "bool is a subclass of int, so booleans would take the integer branch.",
        ),
    }

    def visit_annassign(self, node: nodes.AnnAssign) -> None:
        """Validate annotation style for annotated assignments."""
        self._check_annotation(node.annotation)

    def visit_arguments(self, node: nodes.Arguments) -> None:
        """Validate annotation style for function arguments."""
        for annotation in self._iter_argument_annotations(node):
            self._check_annotation(annotation)

    def visit_functiondef(self, node: nodes.FunctionDef) -> None:
        """Validate return annotation style and isinstance dispatch order."""
        if node.returns is not None:
            self._check_annotation(node.returns)
        self._check_dispatch_order(node)

    def visit_asyncfunctiondef(self, node: nodes.AsyncFunctionDef) -> None:
        """Validate return annotation style and isinstance dispatch order."""
        if node.returns is not None:
            self._check_annotation(node.returns)
        self._check_dispatch_order(node)

    def _check_annotation(self, annotation: nodes.NodeNG) -> None:
        for optional_union in self._iter_optional_pipe_unions(annotation):
            self.add_message(_MESSAGE_PREFER_OPTIONAL, node=optional_union)
        for object_name in self._iter_object_annotations(annotation):
            self.add_message(_MESSAGE_NO_OBJECT_ANNOTATION, node=object_name)

    def _check_dispatch_order(self, node: nodes.FunctionDef) -> None:
        int_checks: dict[str, nodes.Call] = {}
        for call in node.nodes_of_class(nodes.Call):
            if call.scope() is not node:
                continue
            subject, type_names = _isinstance_operands(call)
            if subject is None:
                continue
            if "bool" in type_names:
                earlier_int_check = int_checks.pop(subject, None)
                if earlier_int_check is not None:
                    self.add_message(
                        _MESSAGE_INT_CHECK_BEFORE_BOOL,
                        node=earlier_int_check,
                        args=(subject, subject),
                    )
                continue
            if "int" in type_names:
                int_checks.setdefault(subject, call)

    @staticmethod
    def _iter_argument_annotations(arguments: nodes.Arguments) -> Iterable[nodes.NodeNG]:
        for annotation in arguments.posonlyargs_annotations:
            if annotation is not None:
                yield annotation
        for annotation in arguments.annotations:
            if annotation is not None:
                yield annotation
        for annotation in arguments.kwonlyargs_annotations:
            if annotation is not None:
                yield annotation
        if arguments.varargannotation is not None:
            yield arguments.varargannotation
        if arguments.kwargannotation is not None:
            yield arguments.kwargannotation

    @staticmethod
    def _iter_optional_pipe_unions(annotation: nodes.NodeNG) -> Iterable[nodes.BinOp]:
        for candidate in annotation.nodes_of_class(nodes.BinOp):
            if candidate.op != "|":
                continue
            if _is_none_literal(candidate.left) or _is_none_literal(candidate.right):
                yield candidate

    @staticmethod
    def _iter_object_annotations(annotation: nodes.NodeNG) -> Iterable[nodes.Name]:
        for candidate in annotation.nodes_of_class(nodes.Name):
            if candidate.name == "object":
                yield candidate


def _isinstance_operands(call: nodes.Call) -> tuple[Optional[str], frozenset[str]]:
    """Return the tested name and class names of an ``isinstance(name, ...)`` call."""
    if not isinstance(call.func, nodes.Name) or call.func.name != "isinstance":
        return None, frozenset()
    if len(call.args) != 2 or not isinstance(call.args[0], nodes.Name):
        return None, frozenset()
    classinfo = call.args[1]
    elements = classinfo.elts if isinstance(classinfo, nodes.Tuple) else [classinfo]
    type_names = frozenset(
        element.name for element in elements if isinstance(element, nodes.Name)
    )
    return call.args[0].name, type_names


def _is_none_literal(node: nodes.NodeNG) -> bool:
    return isinstance(node, nodes.Const) and node.value is None


def register(linter: PyLinter) -> None:
    """Register checker."""
    linter.register_checker(ProjectRulesChecker(linter))
