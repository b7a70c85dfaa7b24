#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FlatVFS 格式描述

每种扁平归档格式对应一个常量 FormatDescriptor。
"""

from .base import FormatDescriptor, NameComparison, NamePadding
from .grp import GRP
from .mvl import MVL
from .registry import (
    FORMAT_REGISTRY,
    EXTENSION_TO_FORMAT,
    register_format,
    get_format,
    get_format_by_extension,
    detect_format,
    open_archive,
)

__all__ = [
    # 描述
    "FormatDescriptor",
    "NameComparison",
    "NamePadding",
    # 内置格式
    "GRP",
    "MVL",
    # 注册表
    "FORMAT_REGISTRY",
    "EXTENSION_TO_FORMAT",
    "register_format",
    "get_format",
    "get_format_by_extension",
    "detect_format",
    "open_archive",
]
