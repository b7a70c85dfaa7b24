#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Utils 模块测试

测试路径 / 名称处理函数。
"""

import os

import pytest

from flatvfs.formats.base import NameComparison, NamePadding
from flatvfs.utils import (
    normalize_path,
    normalize_entry_name,
    name_sort_key,
    compare_names,
    is_lookup_candidate,
    get_last_modified_time,
)


# ==================== normalize_path 测试 ====================

class TestNormalizePath:
    """normalize_path 测试"""

    @pytest.mark.parametrize("input_path,expected", [
        ("", ""),
        ("/", ""),
        ("//", ""),
        ("\\", ""),
        ("sub", "sub"),
        ("/sub/", "sub"),
        ("a//b", "a/b"),
        ("a\\b", "a/b"),
    ])
    def test_normalize(self, input_path, expected):
        """目录路径规范化"""
        assert normalize_path(input_path) == expected


# ==================== normalize_entry_name 测试 ====================

class TestNormalizeEntryName:
    """normalize_entry_name 测试"""

    @pytest.mark.parametrize("raw,expected", [
        (b"FILE1       ", "FILE1"),
        (b"GAME.CON    ", "GAME.CON"),
        (b"ABCDEFGHIJKL", "ABCDEFGHIJKL"),
        # 第一个空格之后的内容全部丢弃
        (b"A B         ", "A"),
        (b"TILES000.ART", "TILES000.ART"),
        (b"X\0YZ        ", "X"),
    ])
    def test_space_padding(self, raw, expected):
        """空格填充 (GRP)"""
        assert normalize_entry_name(raw, NamePadding.SPACE) == expected

    @pytest.mark.parametrize("raw,expected", [
        (b"intro.mve\0\0\0\0", "intro.mve"),
        (b"A B.MVE\0\0\0\0\0\0", "A B.MVE"),
        (b"ABCDEFGHI.MVE", "ABCDEFGHI.MVE"),
        (b"\0" * 13, ""),
    ])
    def test_nul_padding(self, raw, expected):
        """NUL 填充 (MVL)，空格保留"""
        assert normalize_entry_name(raw, NamePadding.NUL) == expected

    def test_high_bytes_roundtrip(self):
        """非 ASCII 字节按 latin-1 一一对应"""
        name = normalize_entry_name(b"\xe9T\xe9.DAT     ", NamePadding.SPACE)
        assert name == "\xe9T\xe9.DAT"
        assert name.encode("latin-1") == b"\xe9T\xe9.DAT"


# ==================== 名称比较测试 ====================

class TestCompareNames:
    """compare_names / name_sort_key 测试"""

    def test_case_sensitive(self):
        """区分大小写: 大写字母排在小写字母之前 (strcmp)"""
        mode = NameComparison.CASE_SENSITIVE
        assert compare_names("FILE1", "FILE1", mode) == 0
        assert compare_names("FILE1", "FILE2", mode) < 0
        assert compare_names("b", "A", mode) > 0
        assert compare_names("Z", "a", mode) < 0

    def test_case_insensitive(self):
        """不区分大小写"""
        mode = NameComparison.CASE_INSENSITIVE
        assert compare_names("INTRO.MVE", "intro.mve", mode) == 0
        assert compare_names("apple", "Banana", mode) < 0
        assert compare_names("Z", "a", mode) > 0

    def test_prefix_sorts_first(self):
        """前缀排在更长的名称之前"""
        for mode in NameComparison:
            assert compare_names("A", "A.DAT", mode) < 0

    def test_case_folding_is_ascii_only(self):
        """大小写折叠只作用于 ASCII 字母"""
        key = name_sort_key(NameComparison.CASE_INSENSITIVE)
        assert key("ABC.MVE") == "abc.mve"
        assert key("\xc9") == "\xc9"

    def test_sorted_with_key(self):
        """排序键可直接用于 sorted"""
        names = ["b", "A", "C", "a"]
        key = name_sort_key(NameComparison.CASE_SENSITIVE)
        assert sorted(names, key=key) == ["A", "C", "a", "b"]


# ==================== is_lookup_candidate 测试 ====================

class TestIsLookupCandidate:
    """查找文件名规则测试"""

    @pytest.mark.parametrize("name", [
        "FILE1",
        "GAME.CON",
        "TILES000.ART",
        "ABCDEFGHIJKL",
        "A.B",
        "",
        "NOEXT.",
    ])
    def test_accepted(self, name):
        assert is_lookup_candidate(name)

    @pytest.mark.parametrize("name", [
        # 超过 12 个字符
        "ABCDEFGHIJKLM",
        "ABCDEFGHI.MVE",
        # 含路径分隔符
        "sub/FILE1",
        "/FILE1",
        # 扩展名超过 3 个字符
        "FILE.TEXT",
        # 以第一个 '.' 计算扩展名
        "A.B.CD",
    ])
    def test_rejected(self, name):
        assert not is_lookup_candidate(name)


# ==================== get_last_modified_time 测试 ====================

class TestGetLastModifiedTime:

    def test_matches_stat(self, tmp_path):
        path = tmp_path / "file.bin"
        path.write_bytes(b"data")
        os.utime(path, (1_000_000_000, 1_234_567_890))

        assert get_last_modified_time(str(path)) == 1_234_567_890

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_last_modified_time(str(tmp_path / "missing.grp"))
