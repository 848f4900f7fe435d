# src/instance/__init__.py
from .model import Article, ArticleLocation, Order, ProblemInstance, as_text
from .generator import InstanceSpec, InstanceGenerator, popularity_weights

__all__ = [
    "Article",
    "ArticleLocation",
    "Order",
    "ProblemInstance",
    "as_text",
    "InstanceSpec",
    "InstanceGenerator",
    "popularity_weights",
]
