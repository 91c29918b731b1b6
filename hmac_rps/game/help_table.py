"""
帮助表格
Help Table - 以表格形式展示胜负表
"""
from tabulate import tabulate
from .game_logic import OutcomeTable

CORNER_LABEL = "v User \\ PC >"


def render_help_table(table: OutcomeTable, tablefmt: str = "grid") -> str:
    """
    渲染胜负表：行为玩家招式，列为电脑招式，单元格为玩家视角的结果

    Args:
        table: 胜负表
        tablefmt: tabulate 表格格式

    Returns:
        str: 表格文本
    """
    headers = [CORNER_LABEL] + list(table.moves)
    rows = [[move] + [outcome.value for outcome in table[i]]
            for i, move in enumerate(table.moves)]

    intro = ("Results are shown from your point of view: "
             "find your move in the rows and the computer's move in the columns.")
    return intro + "\n" + tabulate(rows, headers=headers, tablefmt=tablefmt)
