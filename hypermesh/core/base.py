#!/usr/bin/env python3
"""
base.py - Abstract Base Classes for Transforms.
Resolves circular dependencies between algebra/, transform.py and mesh.py.
"""
from abc import ABC, abstractmethod
from typing import List, Any
from dataclasses import dataclass
from functools import reduce


class NotInvertibleError(Exception):
    """Raised when a transform has no inverse."""
    pass


class NotSimpleError(Exception):
    """Raised when a bivector does not square to a pure scalar."""
    pass


class Transform(ABC):
    """Abstract base for every map acting on vectors (or vertices)."""

    @abstractmethod
    def transform(self, operand: Any) -> Any:
        """Apply this transform to a vector representing a point."""
        pass

    # === Algebraic Methods ===

    def inverse(self) -> 'Transform':
        """Return T⁻¹ such that applying T then T⁻¹ gives back the operand."""
        raise NotInvertibleError(f"{type(self).__name__} has no explicit inverse")

    def compose(self, other: 'Transform') -> 'Transform':
        """Sequence: self, and then other."""
        self_steps = self.steps if isinstance(self, SequentialTransform) else [self]
        other_steps = other.steps if isinstance(other, SequentialTransform) else [other]
        return SequentialTransform(steps=self_steps + other_steps)

    def __matmul__(self, other: 'Transform') -> 'Transform':
        """Mathematical composition: (self ∘ other)(v) = self(other(v))."""
        return other.compose(self)

    def __call__(self, operand: Any) -> Any:
        return self.transform(operand)

    @property
    def is_identity(self) -> bool:
        return False


@dataclass
class SequentialTransform(Transform):
    """Transforms applied in order, used when two transforms have no closed-form product."""
    steps: List[Transform]

    def transform(self, operand: Any) -> Any:
        return reduce(lambda v, t: t.transform(v), self.steps, operand)

    def inverse(self) -> 'SequentialTransform':
        """(T1 then T2 ... then Tn)⁻¹ = Tn⁻¹ then ... then T1⁻¹."""
        return SequentialTransform(steps=[t.inverse() for t in reversed(self.steps)])

    def simplify(self) -> Transform:
        """Drop identity steps, unwrap single-step sequences."""
        steps = [t for t in self.steps if not t.is_identity]
        if not steps:
            return IdentityTransform()
        if len(steps) == 1:
            return steps[0]
        return SequentialTransform(steps=steps)

    @property
    def is_identity(self) -> bool:
        return all(t.is_identity for t in self.steps)


@dataclass
class IdentityTransform(Transform):
    """Identity: I(v) = v."""

    def transform(self, operand: Any) -> Any:
        return operand

    def inverse(self) -> 'IdentityTransform':
        return self

    def compose(self, other: Transform) -> Transform:
        return other

    @property
    def is_identity(self) -> bool:
        return True


__all__ = [
    'NotInvertibleError', 'NotSimpleError',
    'Transform', 'SequentialTransform', 'IdentityTransform',
]
