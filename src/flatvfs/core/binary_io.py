#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
二进制 I/O 封装

提供 BinaryReader 类，封装所有底层读操作，
使上层模块不需要直接操作文件指针。
"""

import struct
from typing import BinaryIO, Tuple, Any

from ..exceptions import TruncatedArchiveError


class BinaryReader:
    """
    二进制读取器

    封装所有底层读操作，提供类型化的读取方法。
    所有多字节整数均按 Little-Endian 解码，与宿主字节序无关。
    """

    def __init__(self, file: BinaryIO, position: int = 0):
        """
        初始化读取器

        Args:
            file: 以 'rb' 模式打开的文件对象
            position: 文件对象的当前位置
        """
        self._file = file
        self._position = position

    @property
    def position(self) -> int:
        """当前读取位置"""
        return self._position

    # ==================== 原始读取 ====================

    def read_bytes(self, size: int) -> bytes:
        """
        读取指定字节数

        Args:
            size: 要读取的字节数

        Returns:
            读取的字节

        Raises:
            TruncatedArchiveError: 文件不足请求的字节数
        """
        data = self._file.read(size)
        if len(data) < size:
            raise TruncatedArchiveError(size, len(data))
        self._position += size
        return data

    def read_struct(self, fmt: str) -> Tuple[Any, ...]:
        """
        按 struct 格式读取

        Args:
            fmt: struct 格式字符串

        Returns:
            解包后的值元组
        """
        size = struct.calcsize(fmt)
        data = self.read_bytes(size)
        return struct.unpack(fmt, data)

    # ==================== 类型化读取 ====================

    def read_u32(self) -> int:
        """读取无符号 32 位整数 (Little-Endian)"""
        return self.read_struct('<I')[0]
