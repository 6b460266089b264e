"""端点基础异常

此模块定义所有远程端点(Slack 等)共用的异常基类。
"""


class BaseEndpointError(Exception):
    """端点错误基类

    所有端点特定的异常都应继承此类。
    """

    def __init__(self, message: str):
        """初始化端点错误

        Args:
            message: 错误信息
        """
        super().__init__(message)
        self.message = message
