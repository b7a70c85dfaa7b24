#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
条目文件句柄

在归档文件上为单个条目提供只读游标，游标限制在 [0, entry.size] 内，
逻辑偏移换算为归档文件中的绝对偏移。
"""

import logging
from typing import BinaryIO, Optional

from ..core.schema import Entry
from ..exceptions import (
    InvalidArgumentError,
    NotSupportedError,
    PastEndOfFileError,
)


logger = logging.getLogger(__name__)


class EntryFileHandle:
    """
    条目文件句柄

    每个句柄独立打开归档文件，多个句柄 (即使指向同一条目) 之间不共享文件游标。
    句柄引用的 Entry 属于容器，容器必须比句柄活得更久。
    """

    def __init__(self, file: BinaryIO, entry: Entry):
        """
        初始化句柄

        Args:
            file: 已定位到 entry.start_pos 的文件对象 (由句柄接管)
            entry: 要读取的条目
        """
        self._file: Optional[BinaryIO] = file
        self._entry = entry
        self._position = 0

    @classmethod
    def open(cls, path: str, entry: Entry) -> 'EntryFileHandle':
        """
        独立打开归档文件并定位到条目数据起始处

        Raises:
            OSError: 文件无法打开或定位失败
        """
        file = open(path, 'rb')
        try:
            file.seek(entry.start_pos)
        except Exception:
            file.close()
            raise

        logger.debug("打开条目 '%s' (偏移 %d, 大小 %d)",
                     entry.name, entry.start_pos, entry.size)
        return cls(file, entry)

    def _check_open(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("I/O operation on closed handle")
        return self._file

    # ==================== 读取 ====================

    def read(self, size: Optional[int] = -1) -> bytes:
        """
        读取数据

        请求量超过剩余字节时按剩余字节读取，不视为错误。
        底层介质提前结束时返回的数据少于请求量，游标只前进实际读取的字节数。

        Args:
            size: 要读取的字节数，None 或负数表示读取到条目末尾

        Returns:
            读取的字节
        """
        file = self._check_open()
        remaining = self._entry.size - self._position
        if size is None or size < 0 or size > remaining:
            size = remaining

        data = file.read(size)
        if len(data) < size:
            logger.warning(
                "条目 '%s' 读取不完整: 期望 %d 字节，实际 %d 字节",
                self._entry.name, size, len(data)
            )
        self._position += len(data)
        return data

    def read_objects(self, obj_size: int, obj_count: int) -> bytes:
        """
        按对象读取数据

        只读取完整的对象，数量限制在 (剩余字节 // obj_size) 以内。
        返回数据的长度除以 obj_size 即读取的对象个数。

        Raises:
            InvalidArgumentError: obj_size 不为正数或 obj_count 为负数
        """
        if obj_size <= 0 or obj_count < 0:
            raise InvalidArgumentError(
                f"无效的对象参数: obj_size={obj_size}, obj_count={obj_count}"
            )

        file = self._check_open()
        objs_left = (self._entry.size - self._position) // obj_size
        obj_count = min(obj_count, objs_left)

        data = file.read(obj_size * obj_count)
        whole = len(data) - len(data) % obj_size
        if whole < len(data):
            # 丢弃不完整的对象，底层游标退回到最后一个完整对象之后
            data = data[:whole]
            file.seek(self._entry.start_pos + self._position + whole)

        self._position += whole
        return data

    def write(self, data: bytes) -> int:
        """扁平归档只读，总是抛出 NotSupportedError"""
        raise NotSupportedError("write")

    # ==================== 位置控制 ====================

    def seek(self, offset: int) -> int:
        """
        移动到条目内的指定偏移

        底层定位失败时游标保持不变。

        Args:
            offset: 条目内偏移

        Returns:
            新的游标位置

        Raises:
            InvalidArgumentError: 偏移为负数
            PastEndOfFileError: 偏移不小于条目大小
        """
        file = self._check_open()
        if offset < 0:
            raise InvalidArgumentError(f"偏移不能为负数: {offset}")
        if offset >= self._entry.size:
            raise PastEndOfFileError(offset, self._entry.size)

        file.seek(self._entry.start_pos + offset)
        self._position = offset
        return offset

    def tell(self) -> int:
        """当前游标位置"""
        self._check_open()
        return self._position

    def eof(self) -> bool:
        """游标是否已到达条目末尾"""
        self._check_open()
        return self._position >= self._entry.size

    def length(self) -> int:
        """条目大小 (句柄生命周期内不变)"""
        self._check_open()
        return self._entry.size

    # ==================== 属性 ====================

    @property
    def entry(self) -> Entry:
        return self._entry

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def closed(self) -> bool:
        return self._file is None

    def close(self) -> None:
        """关闭句柄，释放底层文件对象"""
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.debug("关闭条目 '%s'", self._entry.name)

    def __enter__(self) -> 'EntryFileHandle':
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"pos={self._position}"
        return f"<EntryFileHandle {self._entry.name!r} size={self._entry.size} {state}>"
