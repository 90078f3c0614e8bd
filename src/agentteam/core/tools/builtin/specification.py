from __future__ import annotations

from datetime import date
from string import Template
from typing import Any, Callable, Mapping

from agentteam.core.tools.base import (
    ToolOutcome,
    action_schema,
    format_date,
    log_tool_call,
    optional_string,
    text,
    unknown_action,
)

SPECIFICATION_SPEAKER = "仕様書管理係"
UNSPECIFIED_TYPE = "未指定"

SPEC_DOCUMENT = Template(
    """# ${title}

## 概要
${title}の仕様書です。

## 要件
- 機能要件を記載してください
- 非機能要件を記載してください

## 設計
### アーキテクチャ
- システム構成を記載

### データ構造
- データモデルを記載

## 実装方針
- 開発方針
- 技術選定

## テスト計画
- テスト方針
- テストケース

---
*作成日: ${created}*"""
)

SPEC_TEMPLATE_DOCUMENT = Template(
    """# ${type}仕様書テンプレート

## 1. 概要
${type}に関する仕様書のテンプレートです。

## 2. 目的
- この仕様書の目的を記載
- 対象範囲を明確にする

## 3. 要件定義
### 3.1 機能要件
- 必要な機能をリストアップ
- 各機能の詳細説明

### 3.2 非機能要件
- パフォーマンス要件
- セキュリティ要件
- 可用性要件

## 4. システム設計
### 4.1 アーキテクチャ
```
[アーキテクチャ図をここに記載]
```

### 4.2 データ設計
```json
{
  "example": "データ構造の例"
}
```

## 5. インターフェース仕様
### 5.1 API仕様
- エンドポイント一覧
- リクエスト/レスポンス仕様

### 5.2 UI仕様
- 画面設計
- 操作フロー

## 6. 実装方針
- 開発言語・フレームワーク
- 開発環境
- デプロイ方針

## 7. テスト計画
### 7.1 テスト戦略
- ユニットテスト
- 統合テスト
- システムテスト

### 7.2 テストケース
| No | テスト項目 | 期待結果 |
|----|-----------|----------|
| 1  | 例1       | 結果1    |
| 2  | 例2       | 結果2    |

## 8. 運用・保守
- 監視項目
- 保守方針
- 障害対応手順

---
*テンプレート作成日: ${created}*"""
)


def render_spec_document(title: str | None, created: date) -> str:
    return SPEC_DOCUMENT.substitute(title=text(title), created=format_date(created))


def render_spec_template(doc_type: str | None, created: date) -> str:
    return SPEC_TEMPLATE_DOCUMENT.substitute(type=text(doc_type), created=format_date(created))


class SpecificationTool:
    name = "manage_specification"
    description = "Manage project specifications, requirements, and documentation"
    speaker = SPECIFICATION_SPEAKER
    parameters = action_schema(
        ["create_spec", "update_requirement", "review_doc", "generate_template"],
        "The specification management action",
        title=optional_string("Specification title or requirement name"),
        content=optional_string("Specification content or requirement details"),
        type=optional_string("Document type (API, UI, Database, etc.)"),
    )

    def __init__(self, today: Callable[[], date] | None = None) -> None:
        self.today = today or date.today

    def run(self, arguments: Mapping[str, Any]) -> ToolOutcome:
        log_tool_call(self.name, arguments)
        action = arguments.get("action")
        title = arguments.get("title")
        content = arguments.get("content")
        doc_type = arguments.get("type")

        if action == "create_spec":
            return ToolOutcome(
                success=True,
                message=(
                    f"仕様書「{text(title)}」を作成しました！\n"
                    f"タイプ: {doc_type or UNSPECIFIED_TYPE}\n"
                    "マークダウン形式で構造化されています。"
                ),
                data={
                    "title": title,
                    "type": doc_type,
                    "content": content or render_spec_document(title, self.today()),
                },
                speaker=self.speaker,
                show_toast=True,
                record_kind="specification",
            )
        if action == "update_requirement":
            return ToolOutcome(
                success=True,
                message=f"要件「{text(title)}」を更新しました！\n更新内容: {text(content)}",
                data={"requirement": title, "updates": content},
                speaker=self.speaker,
                show_toast=True,
            )
        if action == "review_doc":
            return ToolOutcome(
                success=True,
                message=f"ドキュメント「{text(title)}」をレビューしています...\n現在の仕様書は適切に管理されています。",
                data={"reviewed": title},
                speaker=self.speaker,
            )
        if action == "generate_template":
            return ToolOutcome(
                success=True,
                message=f"{text(doc_type)}仕様書のテンプレートを生成しました！\nマークダウン形式の詳細なテンプレートです。",
                data={
                    "title": f"{text(doc_type)}仕様書テンプレート",
                    "type": doc_type,
                    "content": render_spec_template(doc_type, self.today()),
                },
                speaker=self.speaker,
                show_toast=True,
                record_kind="specification",
            )
        return unknown_action(self.speaker)
