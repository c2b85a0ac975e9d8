"""
文件路径：pdflayout/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：样式相关
  - CONST_：通用常量
  - ERR_：错误码

使用说明：
- 业务模块严禁定义新的全局变量，必须从本模块导入所需常量。
- 长度单位统一为毫米（mm）；与 ReportLab 交互时再换算为磅（pt）。
"""

from typing import Tuple


# =============================
# 路径（PATH_）
# =============================
# 日志目录：环境变量 PDFLAYOUT_LOG_DIR 优先，否则为当前工作目录下的 logs；只在 configure_logging 时解析
PATH_LOG_DIR_ENV: str = "PDFLAYOUT_LOG_DIR"
PATH_LOGS_DIRNAME: str = "logs"
PATH_LOG_FILENAME: str = "pdflayout.log"  # 排版运行日志


# =============================
# 样式（STYLE_）
# =============================
STYLE_FONT_NAME: str = "Helvetica"  # ReportLab 内置标准字体，无需注册
STYLE_FONT_SIZE_DEFAULT: float = 12.0  # 默认字号（pt）
STYLE_TEXT_COLOR_RGB: Tuple[int, int, int] = (0, 0, 0)  # RGB 颜色，黑色
STYLE_LINE_HEIGHT_RATIO: float = 1.2  # 行高 = 行内最大字号 * 该比例
STYLE_ASCENT_RATIO: float = 0.8  # 基线距行顶 = 行内最大字号 * 该比例


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"  # 文件读写默认编码

# 单位换算
CONST_MM_PER_INCH: float = 25.4
CONST_PT_PER_INCH: float = 72.0
# 内部整数排版单位：长度(mm) * 1000 后向零截断，供断行代价计算使用
CONST_LAYOUT_UNIT_SCALE: int = 1000

# 图片默认 DPI（像素 -> 毫米换算）
CONST_IMAGE_DPI_DEFAULT: float = 300.0
# 光栅渲染页面的默认 DPI
CONST_RASTER_DPI_DEFAULT: float = 150.0

# 旋转角度合法区间（闭区间，单位：度）
CONST_ROTATION_MIN: float = -180.0
CONST_ROTATION_MAX: float = 180.0

# 断行分隔符
CONST_WHITESPACE_CHAR: str = " "
CONST_HYPHEN_CHAR: str = "-"

# 断行代价（单位：排版单位的平方，1 mm 的空隙 = 1000**2）
CONST_LINE_PENALTY: int = 1000 * 1000  # 每多一行的固定代价
CONST_HYPHEN_PENALTY: int = 25 * 1000 * 1000  # 以连字符结尾的行的附加代价
CONST_OVERFLOW_PENALTY: int = 2500 * 1000 * 1000  # 单片段超宽独占一行的附加代价

# 连字词典默认语言（pyphen 语言代码）
CONST_HYPHEN_LANG_DEFAULT: str = "en_US"

# 日志（包级 logger 名称与格式）
CONST_LOGGER_NAME: str = "pdflayout"
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/图片源相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在或无法打开
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写
ERR_IMAGE_FORMAT_UNKNOWN: int = 1004  # 无法识别图片格式
ERR_IMAGE_DECODE_FAILED: int = 1005  # 图片解码失败

# 4xxx：参数/数据相关
ERR_DATA_INVALID: int = 4002  # 输入数据非法（负尺寸、非正宽度等）
ERR_ROTATION_OUT_OF_RANGE: int = 4003  # 旋转角度超出 [-180, 180]
ERR_DPI_INVALID: int = 4004  # DPI 非正


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_LOG_DIR_ENV",
    "PATH_LOGS_DIRNAME",
    "PATH_LOG_FILENAME",
    # STYLE_
    "STYLE_FONT_NAME",
    "STYLE_FONT_SIZE_DEFAULT",
    "STYLE_TEXT_COLOR_RGB",
    "STYLE_LINE_HEIGHT_RATIO",
    "STYLE_ASCENT_RATIO",
    # CONST_
    "CONST_ENCODING",
    "CONST_MM_PER_INCH",
    "CONST_PT_PER_INCH",
    "CONST_LAYOUT_UNIT_SCALE",
    "CONST_IMAGE_DPI_DEFAULT",
    "CONST_RASTER_DPI_DEFAULT",
    "CONST_ROTATION_MIN",
    "CONST_ROTATION_MAX",
    "CONST_WHITESPACE_CHAR",
    "CONST_HYPHEN_CHAR",
    "CONST_LINE_PENALTY",
    "CONST_HYPHEN_PENALTY",
    "CONST_OVERFLOW_PENALTY",
    "CONST_HYPHEN_LANG_DEFAULT",
    "CONST_LOGGER_NAME",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_IMAGE_FORMAT_UNKNOWN",
    "ERR_IMAGE_DECODE_FAILED",
    "ERR_DATA_INVALID",
    "ERR_ROTATION_OUT_OF_RANGE",
    "ERR_DPI_INVALID",
]
