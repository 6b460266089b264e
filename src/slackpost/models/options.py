"""post 命令的输入参数模型"""

from pydantic import BaseModel, Field


class PostOptions(BaseModel):
    """post 命令的四个必需输入

    一次构建、整体校验。空字符串视为已提供。
    """

    type_prefix: str = Field(..., description="目的地类型前缀,channels 或 groups 的前缀")
    name: str = Field(..., description="目的地显示名称(精确匹配)")
    token: str = Field(..., description="API token")
    message: str = Field(..., description="消息文本")

    model_config = {"frozen": True}
