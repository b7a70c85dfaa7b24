#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FlatVFS - 游戏引擎扁平归档只读驱动

支持 BUILD 引擎 groupfile (.grp) 和 Descent II Movielib (.mvl)
"""

import logging

__version__ = "0.1.0"

# 库不主动输出日志，由应用程序配置
logging.getLogger(__name__).addHandler(logging.NullHandler())

# 异常类
from .exceptions import (
    FlatVFSError,
    UnsupportedArchiveError,
    TruncatedArchiveError,
    OutOfMemoryError,
    NotSupportedError,
    ReadOnlyArchiveError,
    NoSuchFileError,
    ArchiveNotADirectoryError,
    InvalidArgumentError,
    PastEndOfFileError,
)

# 数据结构
from .core import Entry

# 格式描述
from .formats import (
    FormatDescriptor,
    NameComparison,
    NamePadding,
    GRP,
    MVL,
    register_format,
    get_format,
    get_format_by_extension,
    detect_format,
    open_archive,
)

# 归档读取
from .archive import ArchiveContainer, EntryFileHandle, probe

__all__ = [
    # 版本
    "__version__",
    # 异常
    "FlatVFSError",
    "UnsupportedArchiveError",
    "TruncatedArchiveError",
    "OutOfMemoryError",
    "NotSupportedError",
    "ReadOnlyArchiveError",
    "NoSuchFileError",
    "ArchiveNotADirectoryError",
    "InvalidArgumentError",
    "PastEndOfFileError",
    # 数据结构
    "Entry",
    # 格式
    "FormatDescriptor",
    "NameComparison",
    "NamePadding",
    "GRP",
    "MVL",
    "register_format",
    "get_format",
    "get_format_by_extension",
    "detect_format",
    "open_archive",
    # 归档
    "ArchiveContainer",
    "EntryFileHandle",
    "probe",
]
