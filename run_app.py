"""
属性动画演示 - 启动入口

使用方法:
  python run_app.py
"""

import sys
from pathlib import Path

# 添加项目根目录到 Python 路径（未安装时直接运行）
project_root = Path(__file__).resolve().parent
sys.path.insert(0, str(project_root))

from propertyanimation.main import main


if __name__ == "__main__":
    main()
