#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
格式描述基类定义

扁平归档的各个格式只在布局常量上不同，
因此用一个不可变的 FormatDescriptor 描述格式，而不是各写一套读取代码。
"""

import enum
from dataclasses import dataclass

from ..core.schema import ENTRY_COUNT_SIZE, ENTRY_SIZE_SIZE


class NamePadding(enum.Enum):
    """目录表名称字段的填充方式"""
    SPACE = "space"   # 空格填充，第一个空格截断名称
    NUL = "nul"       # NUL 填充


class NameComparison(enum.Enum):
    """条目名称的比较方式"""
    CASE_SENSITIVE = "case-sensitive"
    CASE_INSENSITIVE = "case-insensitive"


@dataclass(frozen=True)
class FormatDescriptor:
    """
    归档格式描述

    文件布局:
        [签名][条目数量: u32]
        [名称: name_field_width 字节][大小: u32] * 条目数量
        [数据] * 条目数量 (按目录表顺序连续存放，无压缩)
    """
    name: str
    signature: bytes
    name_field_width: int
    name_padding: NamePadding
    name_comparison: NameComparison
    extension: str = ""
    description: str = ""

    @property
    def header_size(self) -> int:
        """文件头大小 (签名 + 条目数量)"""
        return len(self.signature) + ENTRY_COUNT_SIZE

    @property
    def entry_record_size(self) -> int:
        """单条目录记录大小 (名称 + 大小)"""
        return self.name_field_width + ENTRY_SIZE_SIZE

    @property
    def case_sensitive(self) -> bool:
        return self.name_comparison is NameComparison.CASE_SENSITIVE

    def data_offset(self, entry_count: int) -> int:
        """第一个条目数据的绝对偏移 (紧跟目录表)"""
        return self.header_size + entry_count * self.entry_record_size

    def __str__(self) -> str:
        return self.name
