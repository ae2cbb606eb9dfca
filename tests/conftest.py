"""Pytest 配置和 fixtures

定义所有测试共享的 fixtures 和配置。
"""

import pytest

from word_aligner.alignment import SmithWatermanAligner
from word_aligner.output import SnippetFormatter


@pytest.fixture
def aligner():
    """默认权重的对齐器"""
    return SmithWatermanAligner()


@pytest.fixture
def clamped_aligner():
    """逐格截断到 0 的对齐器"""
    return SmithWatermanAligner(clamp_at_zero=True)


@pytest.fixture
def text_formatter():
    """纯文本高亮格式化器"""
    return SnippetFormatter(style="text")


@pytest.fixture
def html_formatter():
    """HTML 高亮格式化器"""
    return SnippetFormatter(style="html")


@pytest.fixture
def long_tokens():
    """30 个互不相同的词元 t0..t29"""
    return [f"t{i}" for i in range(30)]
