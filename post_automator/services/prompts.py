"""Platform-specific prompt for the post generator."""
from post_automator.models.schemas import Article, SocialPlatform

PLATFORM_GUIDELINES: dict[SocialPlatform, str] = {
    SocialPlatform.TWITTER: (
        "The post must be under 280 characters. Use 2-3 relevant hashtags. "
        "The tone should be punchy and engaging."
    ),
    SocialPlatform.LINKEDIN: (
        "The post should be professional and insightful. Use 3-5 relevant hashtags. "
        "Encourage discussion and professional engagement."
    ),
    SocialPlatform.FACEBOOK: (
        "The post should be friendly and conversational. Use a mix of statements and questions "
        "to encourage comments and shares. Include 2-4 relevant hashtags."
    ),
    SocialPlatform.THREADS: (
        "The post can be up to 500 characters. The tone should be conversational and authentic. "
        "Feel free to use relevant hashtags and ask questions to start a conversation."
    ),
}

_missing = set(SocialPlatform) - set(PLATFORM_GUIDELINES)
if _missing:
    raise RuntimeError(f"No prompt guidelines for: {sorted(p.value for p in _missing)}")


def build_prompt(article: Article, platform: SocialPlatform) -> str:
    """Instruction for one post. The article URL is left out; callers append it when sharing."""
    summary_line = f"- Summary: {article.summary}\n" if article.summary else ""
    return f"""You are a social media marketing expert specializing in promoting AI-focused blog content.
Your task is to generate a compelling social media post for {platform.value}.

Article Details:
- Title: {article.title}
{summary_line}
Instructions:
1. Create a post that accurately reflects the article's content and entices users to click the link.
2. Adhere to the following platform-specific guidelines: {PLATFORM_GUIDELINES[platform]}
3. DO NOT include any link or URL in your response. The article link will be appended automatically.
4. Your response must be only the text content for the social media post. Do not add any preamble like "Here is the post:".
"""
