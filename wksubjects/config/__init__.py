"""Configuration module for wksubjects."""

from .settings import Config

__all__ = ['Config']
