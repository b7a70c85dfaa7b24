#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档容器

已加载的扁平归档目录: 有序条目列表 + 归档文件名 + 修改时间。
构建后不可变，负责存在性 / 枚举 / 元信息查询并创建条目文件句柄。
"""

import bisect
import logging
from typing import Iterator, List, Optional

from ..core.schema import Entry
from ..formats.base import FormatDescriptor
from ..utils import (
    normalize_path,
    name_sort_key,
    is_lookup_candidate,
    get_last_modified_time,
)
from ..exceptions import (
    ArchiveNotADirectoryError,
    NoSuchFileError,
    NotSupportedError,
)
from .handle import EntryFileHandle
from .index import load_index


logger = logging.getLogger(__name__)


class ArchiveContainer:
    """
    扁平归档容器

    条目按格式的比较方式升序排列，查找使用二分法。
    同名条目保留磁盘上的先后顺序，查找返回最靠前的一个。

    strict_names=True 时，超过 12 个字符、含 '/'、或扩展名超过 3 个字符的名称
    不经查找直接判定为不存在。归档自身若含有这类名称，它们会出现在枚举结果中
    却无法打开，加载时会记录警告；strict_names=False 关闭这些规则。
    """

    def __init__(
        self,
        filename: str,
        descriptor: FormatDescriptor,
        entries: List[Entry],
        last_modified_time: int,
        strict_names: bool = True
    ):
        """
        初始化容器

        Args:
            filename: 归档文件路径
            descriptor: 格式描述
            entries: 已按名称排序的条目列表
            last_modified_time: 归档文件的修改时间
            strict_names: 是否启用查找时的文件名规则
        """
        self._filename = filename
        self._descriptor = descriptor
        self._entries: Optional[List[Entry]] = entries
        self._last_modified_time = last_modified_time
        self._strict_names = strict_names

        self._sort_key = name_sort_key(descriptor.name_comparison)
        self._keys = [self._sort_key(entry.name) for entry in entries]

        if strict_names:
            for entry in entries:
                if not is_lookup_candidate(entry.name):
                    logger.warning(
                        "条目 '%s' 不符合文件名规则，无法通过名称打开 (%s)",
                        entry.name, filename
                    )

    @classmethod
    def open(
        cls,
        path: str,
        descriptor: FormatDescriptor,
        *,
        for_writing: bool = False,
        strict_names: bool = True
    ) -> 'ArchiveContainer':
        """
        加载归档

        Raises:
            ReadOnlyArchiveError: 以写模式打开
            UnsupportedArchiveError: 签名不匹配
            TruncatedArchiveError: 文件头或目录表不完整
            OutOfMemoryError: 内存不足
        """
        entries = load_index(path, descriptor, for_writing)
        modtime = get_last_modified_time(path)

        logger.debug("已加载 %s 归档 '%s': %d 个条目",
                     descriptor, path, len(entries))
        return cls(path, descriptor, entries, modtime, strict_names)

    def _check_open(self) -> List[Entry]:
        if self._entries is None:
            raise ValueError("operation on closed archive")
        return self._entries

    def _find(self, name: str) -> Optional[Entry]:
        """二分查找，未找到返回 None"""
        entries = self._check_open()
        if self._strict_names and not is_lookup_candidate(name):
            return None

        key = self._sort_key(name)
        index = bisect.bisect_left(self._keys, key)
        if index < len(entries) and self._keys[index] == key:
            return entries[index]
        return None

    # ==================== 查询 ====================

    def exists(self, name: str) -> bool:
        """检查条目是否存在"""
        return self._find(name) is not None

    def lookup(self, name: str) -> Entry:
        """
        获取指定名称的条目

        Raises:
            NoSuchFileError: 条目不存在
        """
        entry = self._find(name)
        if entry is None:
            raise NoSuchFileError(name)
        return entry

    def is_directory(self, name: str) -> bool:
        """扁平归档没有目录"""
        self._check_open()
        return False

    def is_symlink(self, name: str) -> bool:
        """扁平归档没有符号链接"""
        self._check_open()
        return False

    def enumerate(self, dirname: str = "") -> Iterator[str]:
        """
        枚举条目名称

        按容器的排序顺序返回惰性迭代器，只能遍历一次。

        Args:
            dirname: 目录名，只能是根目录 ("" 或 "/")

        Raises:
            ArchiveNotADirectoryError: dirname 不是根目录
        """
        entries = self._check_open()
        if normalize_path(dirname):
            raise ArchiveNotADirectoryError(dirname)
        return (entry.name for entry in entries)

    def iter_entries(self) -> Iterator[Entry]:
        """按排序顺序迭代所有条目"""
        return iter(self._check_open())

    def get_modified_time(self, name: str) -> int:
        """
        获取条目的修改时间

        条目没有独立的时间戳，返回归档文件本身的修改时间。

        Raises:
            NoSuchFileError: 条目不存在
        """
        self.lookup(name)
        return self._last_modified_time

    # ==================== 读取 ====================

    def open_read(self, name: str) -> EntryFileHandle:
        """
        以只读方式打开条目

        每次调用都独立打开归档文件。

        Raises:
            NoSuchFileError: 条目不存在
            OSError: 归档文件无法打开或定位
        """
        entry = self.lookup(name)
        return EntryFileHandle.open(self._filename, entry)

    def read(self, name: str) -> bytes:
        """读取条目的全部内容"""
        with self.open_read(name) as handle:
            return handle.read()

    # ==================== 写入 (不支持) ====================

    def open_write(self, name: str) -> EntryFileHandle:
        raise NotSupportedError("open_write")

    def open_append(self, name: str) -> EntryFileHandle:
        raise NotSupportedError("open_append")

    def remove(self, name: str) -> None:
        raise NotSupportedError("remove")

    def mkdir(self, name: str) -> None:
        raise NotSupportedError("mkdir")

    # ==================== 属性 ====================

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def descriptor(self) -> FormatDescriptor:
        return self._descriptor

    @property
    def last_modified_time(self) -> int:
        return self._last_modified_time

    @property
    def entry_count(self) -> int:
        return len(self._check_open())

    @property
    def strict_names(self) -> bool:
        return self._strict_names

    @property
    def closed(self) -> bool:
        return self._entries is None

    def __len__(self) -> int:
        return self.entry_count

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def close(self) -> None:
        """
        关闭容器并释放条目

        容器不持有打开的文件；尚未关闭的条目句柄由调用方负责。
        """
        self._entries = None
        self._keys = []

    def __enter__(self) -> 'ArchiveContainer':
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        count = "closed" if self.closed else f"{len(self._entries)} entries"
        return f"<ArchiveContainer {self._descriptor} {self._filename!r} {count}>"
