"""
Tests - 测试集合

pytest 单元测试，覆盖分词、打分矩阵、回溯、片段渲染、API 与命令行。

1. test_tokens.py - 分词与词元规范化
2. test_smith_waterman.py - 打分矩阵、最佳单元格与回溯
3. test_formatter.py - 高亮片段与上下文截断
4. test_api.py - align() 与 SmithWaterman 封装
5. test_cli.py - 命令行入口
6. test_all.py - 数据模型基础测试

运行所有测试:
  python -m pytest tests/ -v
"""
