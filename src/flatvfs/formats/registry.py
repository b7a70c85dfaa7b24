#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
格式注册表

提供格式名 / 扩展名到 FormatDescriptor 的映射，
以及按文件签名探测格式并打开归档的入口。
"""

import logging
import os
from typing import Dict, List, Optional, Tuple, Union, TYPE_CHECKING

from .base import FormatDescriptor
from .grp import GRP
from .mvl import MVL

if TYPE_CHECKING:
    from ..archive.container import ArchiveContainer


logger = logging.getLogger(__name__)


# ==================== 格式注册表 ====================

# 内置格式 (新增内置格式时只需在此添加)
_BUILTIN_FORMATS: Tuple[FormatDescriptor, ...] = (
    GRP,
    MVL,
)

# 探测顺序: 内置格式在前，register_format 注册的格式依次追加
_FORMATS: List[FormatDescriptor] = list(_BUILTIN_FORMATS)


def _build_format_registry() -> Dict[str, FormatDescriptor]:
    """从描述列表构建 格式名 -> 描述 映射"""
    return {fmt.name.upper(): fmt for fmt in _BUILTIN_FORMATS}


# 格式名 -> FormatDescriptor 映射表
FORMAT_REGISTRY: Dict[str, FormatDescriptor] = _build_format_registry()

# 扩展名 -> FormatDescriptor (反向映射)
EXTENSION_TO_FORMAT: Dict[str, FormatDescriptor] = {
    fmt.extension.lower(): fmt for fmt in _BUILTIN_FORMATS if fmt.extension
}


def register_format(descriptor: FormatDescriptor) -> None:
    """
    注册新的格式描述

    Raises:
        ValueError: 格式名已被注册
    """
    key = descriptor.name.upper()
    if key in FORMAT_REGISTRY:
        raise ValueError(f"格式已注册: {descriptor.name}")
    _FORMATS.append(descriptor)
    FORMAT_REGISTRY[key] = descriptor
    if descriptor.extension:
        EXTENSION_TO_FORMAT.setdefault(descriptor.extension.lower(), descriptor)


def get_format(name: str) -> Optional[FormatDescriptor]:
    """根据格式名获取描述 (不区分大小写)，未找到返回 None"""
    return FORMAT_REGISTRY.get(name.upper())


def get_format_by_extension(path: str) -> Optional[FormatDescriptor]:
    """根据文件扩展名获取描述，未找到返回 None"""
    ext = os.path.splitext(path)[1].lstrip(".").lower()
    return EXTENSION_TO_FORMAT.get(ext)


def detect_format(path: str) -> Optional[FormatDescriptor]:
    """
    按签名探测文件格式

    依次用每个已注册格式探测文件，返回第一个匹配的格式。
    扩展名只决定探测的先后，不决定结果。

    Returns:
        匹配的格式描述，均不匹配返回 None
    """
    from ..archive.opener import probe

    candidates = list(_FORMATS)
    hinted = get_format_by_extension(path)
    if hinted is not None:
        candidates.remove(hinted)
        candidates.insert(0, hinted)

    for fmt in candidates:
        if probe(path, fmt):
            return fmt

    return None


def open_archive(
    path: str,
    fmt: Union[str, FormatDescriptor, None] = None,
    **options
) -> 'ArchiveContainer':
    """
    打开扁平归档

    Args:
        path: 归档文件路径
        fmt: 格式名、格式描述，或 None (按签名自动探测)
        **options: 传给 ArchiveContainer.open 的选项 (如 strict_names)

    Raises:
        UnsupportedArchiveError: 没有任何格式匹配，或指定格式的签名不匹配
        ValueError: 格式名未注册
    """
    from ..archive.container import ArchiveContainer
    from ..exceptions import UnsupportedArchiveError

    if isinstance(fmt, str):
        descriptor = get_format(fmt)
        if descriptor is None:
            raise ValueError(f"未知的格式: {fmt}")
    elif fmt is None:
        descriptor = detect_format(path)
        if descriptor is None:
            logger.debug("没有格式匹配 '%s'", path)
            raise UnsupportedArchiveError(path)
    else:
        descriptor = fmt

    return ArchiveContainer.open(path, descriptor, **options)
