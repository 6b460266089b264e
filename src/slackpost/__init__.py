"""slack-post: 按名称向 Slack 频道或群组发送消息"""

__version__ = "0.1.0"
