#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FlatVFS 异常定义

所有异常均继承自 FlatVFSError，便于统一捕获。
与内置异常语义相同的情况同时继承对应的内置异常 (FileNotFoundError 等)。
"""

import io


class FlatVFSError(Exception):
    """FlatVFS 基础异常"""
    pass


class UnsupportedArchiveError(FlatVFSError):
    """
    不支持的归档格式

    文件签名与格式描述不匹配时抛出，表示该文件不是此格式。
    """
    def __init__(self, path: str, expected: bytes = None, actual: bytes = None):
        self.path = path
        self.expected = expected
        self.actual = actual
        message = f"'{path}' 不是受支持的归档"
        if expected is not None and actual is not None:
            message = f"{message}: 期望签名 {expected!r}, 实际 {actual!r}"
        super().__init__(message)


class TruncatedArchiveError(FlatVFSError, EOFError):
    """
    归档截断

    解析文件头或目录表时读取到的字节数不足。
    """
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"文件结束: 期望读取 {expected} 字节，实际只有 {actual} 字节"
        )


class OutOfMemoryError(FlatVFSError, MemoryError):
    """构建索引时内存不足"""
    pass


class NotSupportedError(FlatVFSError, io.UnsupportedOperation):
    """
    不支持的操作

    归档为只读格式，所有写入类操作 (写入、追加、删除、建目录) 均抛出此异常。
    """
    def __init__(self, operation: str, message: str = None):
        self.operation = operation
        super().__init__(message or f"不支持的操作: {operation}")


class ReadOnlyArchiveError(NotSupportedError):
    """以写模式打开只读归档"""
    def __init__(self, path: str):
        self.path = path
        super().__init__("open for writing", f"归档为只读: '{path}'")


class NoSuchFileError(FlatVFSError, FileNotFoundError):
    """
    条目不存在

    包括被文件名规则 (长度、扩展名、路径分隔符) 直接排除的名称。
    """
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"条目不存在: '{name}'")


class ArchiveNotADirectoryError(FlatVFSError, NotADirectoryError):
    """扁平归档没有子目录，只有根目录可以枚举"""
    def __init__(self, dirname: str):
        self.dirname = dirname
        super().__init__(f"不是目录: '{dirname}'")


class InvalidArgumentError(FlatVFSError, ValueError):
    """参数无效 (如负数偏移)"""
    pass


class PastEndOfFileError(FlatVFSError, EOFError):
    """定位超出条目末尾"""
    def __init__(self, offset: int, size: int):
        self.offset = offset
        self.size = size
        super().__init__(f"偏移 {offset} 超出条目末尾 (大小 {size})")
