"""Prompts for quote (sales proposal) generation."""

DEFAULT_QUOTE_TEMPLATE = """根据客户需求推荐2个服务套餐写成《XXX x Nexad: 市场穿透与全球增长护城河构建方案》，尽量用表格形式。分成两部分：一、汇总Customer Context，二、 推荐的解决方案

第一部分：
一、XXX 决策背景与核心需求汇总 (Customer Context)
表 1：战略目标与增长兴趣点 (Goals & Interests)
目标类别
详细描述
投放目标

预算预期

核心兴趣点

反向工程

表 2：业务现状与产品优势 (Status Quo)
维度
详细情况与核心卖点
产品核心卖点

具体产品与产品类型

市场竞争格局

营销现状与痛点

商业模式

战略与节奏

二、 推荐的解决方案
套餐分成A. Nexad Growth Credits 和 B. Nexad Solution Credits 。
A是广告投放金额（较便宜的套餐默认不填广告金额，备注优化师团队调研后决定），表格里写优化团队根据调研结果评估即可。"""

VARIANT_HINT = """【注意】这是第二个备选方案。请在套餐组合、预算分配或策略侧重点上与常规方案明显不同，为客户提供另一种可行的选择。"""

CLIENT_INFO_TEMPLATE = """客户信息：
{lines}
方案标题中的 XXX 请替换为客户品牌名。"""

TRANSCRIPT_SECTION = """以下是客户沟通内容（录音转写、文档或文字记录）：
{transcription}"""

PRICE_LIST_SECTION = """以下是公司价目表：
{price_list}"""

MARKDOWN_FORMAT_INSTRUCTIONS = """请根据以上信息生成专业的报价方案，使用Markdown格式输出。确保：
1. 准确理解客户的需求和业务背景
2. 根据客户情况推荐最合适的套餐组合
3. 使用表格清晰展示信息
4. 包含投入产出预估
5. 语言专业且有说服力"""

PLAIN_TEXT_FORMAT_INSTRUCTIONS = """请根据以上信息生成专业的报价方案，使用纯文本格式输出（不要使用Markdown语法，不要使用 #、*、| 等符号）。确保：
1. 准确理解客户的需求和业务背景
2. 根据客户情况推荐最合适的套餐组合
3. 用清晰的编号和分段展示信息
4. 包含投入产出预估
5. 语言专业且有说服力"""

MARKDOWN_SYSTEM_PROMPT = """你是 Nexad 的专业销售顾问，擅长根据客户需求制定精准的营销解决方案。你的输出应该专业、有条理、使用Markdown格式，并且重点突出客户价值。"""

PLAIN_TEXT_SYSTEM_PROMPT = """你是 Nexad 的专业销售顾问，擅长根据客户需求制定精准的营销解决方案。你的输出应该专业、有条理、使用纯文本格式，并且重点突出客户价值。"""

REVISION_TEMPLATE = """你是一个专业的方案修改助手。用户已有一份增长方案，现在需要根据用户的具体要求进行修改。
请：
1. 理解用户的修改意图
2. 保持方案的整体结构和专业性
3. 只修改用户要求的部分
4. 输出完整的修改后方案"""

REVISION_REQUEST_TEMPLATE = """当前方案内容：
{current_proposal}

用户修改要求：
{instruction}

请根据用户的修改要求，对当前方案进行调整和优化。"""
