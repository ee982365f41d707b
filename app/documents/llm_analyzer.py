# -*- coding: UTF-8 -*-
"""
@File ：llm_analyzer.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/11/7 16:22
@DOC: LLM 文档分析适配器

通过 OpenAI 兼容的 /chat/completions 接口（默认 OpenRouter）对文档文本做摘要、
分类和元数据提取。只发送文本的前 LLM_MAX_INPUT_CHARS 个字符，超长文档只分析前缀。
"""
import json
import re

import httpx
from loguru import logger

from app.core.config import settings
from app.core.exceptions import LLMAnalysisError, LLMResponseParseError
from app.documents.ports import AnalyzerPort
from app.schemas.schemas import AnalysisResult

DEFAULT_SUMMARY = "No summary available"
DEFAULT_DOC_TYPE = "unknown"

ANALYSIS_PROMPT_TEMPLATE = """Analyze the following document and provide:
1. A concise summary (2-3 sentences)
2. Document type (invoice, CV, report, letter, contract, email, or other)
3. Extracted metadata (date, sender, recipient, total amount if applicable, etc.)

Document text:
{text}

Please respond in the following JSON format:
{{
  "summary": "A concise summary of the document",
  "docType": "document type here",
  "attributes": {{
    "date": "extracted date if available",
    "sender": "sender/author if available",
    "recipient": "recipient if available",
    "totalAmount": "total amount if available",
    "subject": "subject/title if available"
  }}
}}

Respond ONLY with valid JSON."""

# 从第一个 { 到最后一个 }，兼容模型在 JSON 前后加说明文字或代码块
_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def build_analysis_prompt(text: str, max_chars: int | None = None) -> str:
    limit = settings.LLM_MAX_INPUT_CHARS if max_chars is None else max_chars
    return ANALYSIS_PROMPT_TEMPLATE.format(text=text[:limit])


def parse_analysis_response(content: str) -> AnalysisResult:
    """
    解析模型返回内容。缺少的字段使用默认值而不是报错：
    summary -> "No summary available"，docType -> "unknown"，attributes -> {}
    """
    match = _JSON_OBJECT_RE.search(content or "")
    if not match:
        raise LLMResponseParseError("Failed to parse LLM response: No JSON found in response")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise LLMResponseParseError(f"Failed to parse LLM response: {e}") from e

    logger.debug(f"LLM 返回的 JSON: {parsed}")

    attributes = parsed.get("attributes") or {}
    if not isinstance(attributes, dict):
        logger.warning(f"attributes 不是 JSON 对象，已忽略: {str(attributes)[:100]}")
        attributes = {}

    return AnalysisResult(
        summary=str(parsed.get("summary") or DEFAULT_SUMMARY),
        doc_type=str(parsed.get("docType") or DEFAULT_DOC_TYPE),
        attributes=attributes,
    )


class OpenRouterAnalyzer(AnalyzerPort):

    def __init__(
            self,
            api_key: str | None = None,
            model: str | None = None,
            base_url: str | None = None,
            temperature: float | None = None,
            max_tokens: int | None = None,
            timeout: float | None = None,
            transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = settings.OPENROUTER_API_KEY if api_key is None else api_key
        self.model = model or settings.OPENROUTER_MODEL
        self.base_url = (base_url or settings.OPENROUTER_BASE_URL).rstrip("/")
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or settings.LLM_MAX_TOKENS
        self.timeout = timeout or settings.LLM_TIMEOUT
        # 测试时注入 httpx.MockTransport
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": settings.OPENROUTER_REFERER,
            "X-Title": settings.OPENROUTER_TITLE,
        }

    async def analyze_document(self, text: str) -> AnalysisResult:
        prompt = build_analysis_prompt(text)
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        logger.info(f"调用 LLM 分析文档 (model={self.model}, 文本长度={len(text)})")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=payload,
                    headers=self._headers(),
                )
                response.raise_for_status()
                data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"LLM 接口调用失败: {e}")
            raise LLMAnalysisError(f"Failed to analyze document with LLM: {e}") from e

        logger.info(f"LLM 返回内容 (前100字符): {str(content)[:100]}...")
        return parse_analysis_response(content)
