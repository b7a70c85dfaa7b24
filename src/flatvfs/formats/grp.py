#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
BUILD 引擎 groupfile (.grp)

前 12 字节为 "KenSilverman"，随后 4 字节为文件数量；
每个文件一条 16 字节记录: 12 字节文件名 (空格填充) + 4 字节大小。
其余部分为按记录顺序紧密排列的原始数据。
"""

from .base import FormatDescriptor, NameComparison, NamePadding


GRP = FormatDescriptor(
    name="GRP",
    signature=b"KenSilverman",
    name_field_width=12,
    name_padding=NamePadding.SPACE,
    name_comparison=NameComparison.CASE_SENSITIVE,
    extension="grp",
    description="Build engine Groupfile format",
)
