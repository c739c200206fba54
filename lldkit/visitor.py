"""Visitor pattern: calculations over shapes without changing the shapes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _fmt(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ShapeVisitor(ABC):
    """An operation that can be applied to every kind of shape."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> float:
        """Apply the operation to a circle."""

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> float:
        """Apply the operation to a rectangle."""

    @abstractmethod
    def visit_square(self, square: Square) -> float:
        """Apply the operation to a square."""


class Shape(ABC):
    """A shape that lets visitors operate on it."""

    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> float:
        """Hand this shape to the visitor and return its result."""


@dataclass
class Circle(Shape):
    radius: int

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_circle(self)


@dataclass
class Square(Shape):
    side: int

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_square(self)


@dataclass
class Rectangle(Shape):
    length: int
    breadth: int

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_rectangle(self)


class AreaCalculator(ShapeVisitor):
    """Prints and returns the area of each shape it visits."""

    def visit_circle(self, circle: Circle) -> float:
        area = 3.14 * float(circle.radius) * float(circle.radius)
        print("Area of Circle:", _fmt(area))
        return area

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        area = rectangle.length * rectangle.breadth
        print("Area of Rectangle:", _fmt(area))
        return area

    def visit_square(self, square: Square) -> float:
        area = square.side * square.side
        print("Area of Square:", _fmt(area))
        return area


class CircumferenceCalculator(ShapeVisitor):
    """Prints and returns the perimeter of each shape it visits."""

    def visit_circle(self, circle: Circle) -> float:
        circumference = 2 * math.pi * float(circle.radius)
        print("Circumference of Circle:", _fmt(circumference))
        return circumference

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        circumference = 2 * (rectangle.length + rectangle.breadth)
        print("Circumference of Rectangle:", _fmt(circumference))
        return circumference

    def visit_square(self, square: Square) -> float:
        circumference = 4 * square.side
        print("Circumference of Square:", _fmt(circumference))
        return circumference