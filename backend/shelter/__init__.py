"""
动物收容所登记系统
动物登记、检索与领养家庭记录
"""

__version__ = "0.1.0"
