from typing import Dict, Any, List, Sequence
from services.alignment import missing_tokens
from services.tokenizer import is_single_char_word


class GrammarAnalyzer:
    def key_tokens(self, content_tokens: Sequence[str]) -> List[str]:
        """Reference words worth checking: longer than one character, or a lone ideograph"""
        return [word for word in content_tokens if len(word) > 1 or is_single_char_word(word)]

    def analyze_grammar(self, reference_content: Sequence[str], hypothesis: Sequence[str], has_reference: bool) -> Dict[str, Any]:
        """Approximate grammar as coverage of the reference keywords"""
        if not has_reference:
            return {"key_token_count": 0, "missing_keywords": [], "grammar_score": 1.0}

        keywords = self.key_tokens(reference_content)
        if not keywords:
            return {"key_token_count": 0, "missing_keywords": [], "grammar_score": 1.0}

        missing = missing_tokens(keywords, hypothesis)
        return {
            "key_token_count": len(keywords),
            "missing_keywords": missing,
            "grammar_score": 1.0 - len(missing) / len(keywords),
        }
