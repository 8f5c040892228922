"""Demos module - Console and pygame views of paths and cycles"""
from .console import format_overlay, route_order, visualize_route

__all__ = ['format_overlay', 'route_order', 'visualize_route']
