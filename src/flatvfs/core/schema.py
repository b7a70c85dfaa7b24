#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FlatVFS 数据结构定义

定义 Entry 条目结构和扁平归档共用的布局常量。
"""

from dataclasses import dataclass


# ==================== 常量定义 ====================

# 签名之后的条目数量字段 (u32, Little-Endian)
ENTRY_COUNT_FORMAT = '<I'
ENTRY_COUNT_SIZE = 4

# 目录表中的大小字段 (u32, Little-Endian)
ENTRY_SIZE_FORMAT = '<I'
ENTRY_SIZE_SIZE = 4

# 查找时的文件名规则 (8.3 风格)
MAX_LOOKUP_NAME_LENGTH = 12
MAX_EXTENSION_LENGTH = 3
PATH_SEPARATOR = '/'


# ==================== 条目 ====================

@dataclass(frozen=True)
class Entry:
    """
    归档中的单个文件

    构建后不可变。start_pos 为数据在归档文件中的绝对偏移，
    按磁盘顺序累加前面所有条目的大小得到。
    """
    name: str
    size: int
    start_pos: int

    @property
    def end_pos(self) -> int:
        """数据结束位置 (不含)"""
        return self.start_pos + self.size
