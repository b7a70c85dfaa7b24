#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
索引构建

读取固定大小的目录表，计算每个条目的绝对偏移，并按名称排序以便二分查找。
"""

import logging
from typing import BinaryIO, List

from ..core.binary_io import BinaryReader
from ..core.schema import Entry, ENTRY_SIZE_FORMAT
from ..formats.base import FormatDescriptor
from ..utils import normalize_entry_name, name_sort_key
from ..exceptions import OutOfMemoryError
from .opener import open_raw


logger = logging.getLogger(__name__)


def build_index(
    file: BinaryIO,
    entry_count: int,
    descriptor: FormatDescriptor
) -> List[Entry]:
    """
    从文件头之后的位置读取目录表并构建有序索引

    偏移必须按磁盘顺序累加，排序在偏移分配之后进行。
    排序是稳定的，同名条目保持磁盘顺序。

    Args:
        file: 定位在条目数量字段之后的文件对象 (不会被关闭)
        entry_count: 条目数量
        descriptor: 格式描述

    Returns:
        按名称升序排列的条目列表

    Raises:
        TruncatedArchiveError: 目录表不完整 (已读取的条目全部丢弃)
        OutOfMemoryError: 内存不足
    """
    reader = BinaryReader(file, descriptor.header_size)
    location = descriptor.data_offset(entry_count)
    entries: List[Entry] = []

    try:
        for _ in range(entry_count):
            raw_name = reader.read_bytes(descriptor.name_field_width)
            size = reader.read_struct(ENTRY_SIZE_FORMAT)[0]

            name = normalize_entry_name(raw_name, descriptor.name_padding)
            entries.append(Entry(name=name, size=size, start_pos=location))
            location += size
    except MemoryError as e:
        raise OutOfMemoryError(
            f"构建索引时内存不足 (条目数量 {entry_count})"
        ) from e

    key = name_sort_key(descriptor.name_comparison)
    entries.sort(key=lambda entry: key(entry.name))

    _warn_duplicates(entries, descriptor)
    return entries


def _warn_duplicates(entries: List[Entry], descriptor: FormatDescriptor) -> None:
    """同名条目只有磁盘上第一个可被查找到"""
    key = name_sort_key(descriptor.name_comparison)
    first = None
    for entry in entries:
        if first is not None and key(first.name) == key(entry.name):
            logger.warning(
                "重复的条目名 '%s' (偏移 %d)，查找时使用偏移 %d 的条目",
                entry.name, entry.start_pos, first.start_pos
            )
        else:
            first = entry


def load_index(
    path: str,
    descriptor: FormatDescriptor,
    for_writing: bool = False
) -> List[Entry]:
    """
    打开归档、构建索引并关闭文件

    无论成功与否，扫描目录表所用的文件对象都会被关闭。
    """
    file, entry_count = open_raw(path, descriptor, for_writing)
    try:
        return build_index(file, entry_count, descriptor)
    finally:
        file.close()
