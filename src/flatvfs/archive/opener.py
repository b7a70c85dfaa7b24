#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档打开器

校验文件签名并读取条目数量。
既用于 "是否为此格式" 的探测，也用于正式加载。
"""

import logging
from typing import BinaryIO, Tuple

from ..core.binary_io import BinaryReader
from ..core.schema import ENTRY_COUNT_FORMAT
from ..formats.base import FormatDescriptor
from ..exceptions import (
    FlatVFSError,
    ReadOnlyArchiveError,
    UnsupportedArchiveError,
)


logger = logging.getLogger(__name__)


def open_raw(
    path: str,
    descriptor: FormatDescriptor,
    for_writing: bool = False
) -> Tuple[BinaryIO, int]:
    """
    打开归档并读取文件头

    成功时返回的文件对象正好定位在条目数量字段之后，可直接读取目录表；
    失败时文件对象已关闭。

    Args:
        path: 归档文件路径
        descriptor: 格式描述
        for_writing: 是否以写模式打开 (扁平归档只读，总是失败)

    Returns:
        (文件对象, 条目数量) 元组

    Raises:
        ReadOnlyArchiveError: 以写模式打开 (不进行任何 I/O)
        UnsupportedArchiveError: 签名不匹配
        TruncatedArchiveError: 文件头不完整
        OSError: 文件无法打开
    """
    if for_writing:
        raise ReadOnlyArchiveError(path)

    file = open(path, 'rb')
    try:
        reader = BinaryReader(file)

        signature = reader.read_bytes(len(descriptor.signature))
        if signature != descriptor.signature:
            raise UnsupportedArchiveError(path, descriptor.signature, signature)

        entry_count = reader.read_struct(ENTRY_COUNT_FORMAT)[0]
    except Exception:
        file.close()
        raise

    return file, entry_count


def probe(path: str, descriptor: FormatDescriptor, for_writing: bool = False) -> bool:
    """
    探测文件是否为指定格式

    写模式探测、签名不匹配、文件头不完整或文件无法打开均返回 False。
    """
    if for_writing:
        return False

    try:
        file, _ = open_raw(path, descriptor)
    except (FlatVFSError, OSError) as e:
        logger.debug("'%s' 不是 %s 归档: %s", path, descriptor, e)
        return False

    file.close()
    return True
