"""The seven Elfa AI actions, expressed as data for the generic orchestrator."""

from __future__ import annotations

from elfa_core.schema.action import ActionDescriptor, ActionExample, FieldSpec

_TWEET_DETAILS = "Make sure you mention details of the tweet such as date, post metrics and the tweet content"

PING = ActionDescriptor(
    name="ELFA_PING",
    similes=("ping elfa", "elfa health check", "check elfa api"),
    description="Checks the health of the Elfa AI API by pinging it.",
    path="/v1/ping",
    success_text="Elfa AI API is up and running.",
    failure_text="Elfa AI API is down. Please check the API status.",
    examples=(ActionExample(user="ping elfa", agent="Elfa AI API is up and running."),),
)

API_KEY_STATUS = ActionDescriptor(
    name="ELFA_API_KEY_STATUS",
    similes=("elfa api key status", "check api key", "api key info"),
    description="Retrieves the status and usage details of the Elfa AI API key.",
    path="/v1/key-status",
    success_text="Elfa AI API key status.",
    failure_text="Failed to get api key status from Elfa AI. Please check your API key.",
    examples=(
        ActionExample(
            user="elfa api key status",
            agent="Elfa AI API key status retrieved successfully",
        ),
    ),
)

SMART_MENTIONS = ActionDescriptor(
    name="ELFA_GET_SMART_MENTIONS",
    similes=("get mentions", "smart mentions", "fetch mentions"),
    description="Retrieves tweets by smart accounts with smart engagement from the Elfa AI API.",
    path="/v1/mentions",
    fields=(
        FieldSpec(
            name="limit",
            type="number",
            description="The number of smart mentions to retrieve.",
            default=100,
        ),
        FieldSpec(
            name="offset",
            type="number",
            description="The offset to start retrieving smart mentions from.",
            default=0,
        ),
    ),
    schema_name="GetSmartMentionsSchema",
    schema_description="Schema for getting smart mentions from Elfa AI API",
    extraction_subject="about the requested smart mentions",
    summary_instruction="Extracted information and summarize the smart mentions from the Elfa AI API.",
    success_text="Retrieves tweets by smart accounts with smart engagement from the Elfa AI API:",
    failure_text="Failed to get smart mentions from Elfa AI API.",
    invalid_text="Unable to process get smart mentions request. Invalid content provided.",
    invalid_error="Invalid get smart mentions content",
    examples=(
        ActionExample(user="get smart mentions", agent="Smart mentions retrieved successfully"),
    ),
)

TOP_MENTIONS = ActionDescriptor(
    name="ELFA_GET_TOP_MENTIONS",
    similes=("top mentions", "get top mentions", "fetch top mentions", "get top tweets"),
    description="Retrieves top tweets for a given ticker symbol from the Elfa AI API.",
    path="/v1/top-mentions",
    fields=(
        FieldSpec(
            name="ticker",
            type="string",
            description="symbol to retrieve mentions for.",
            required=True,
            example="SOL",
            min_length=1,
        ),
        FieldSpec(
            name="timeWindow",
            type="string",
            description="Time window for mentions eg - 1h, 24h, 7d (default: 1h).",
            default="1h",
            min_length=2,
        ),
        FieldSpec(
            name="page",
            type="number",
            description="Page number for pagination (default: 1).",
            default=1,
        ),
        FieldSpec(
            name="pageSize",
            type="number",
            description="Number of mentions per page (default: 10).",
            default=10,
        ),
        FieldSpec(
            name="includeAccountDetails",
            type="boolean",
            description="Include account details in the response (default: false).",
            default=False,
        ),
    ),
    schema_name="GetTopMentionsSchema",
    schema_description="Schema for getting top mentions for a specific ticker from Elfa AI API",
    extraction_subject="about the requested top mentions",
    summary_instruction=(
        "Extracted information and summarize the top tweets for a specific ticker from the "
        f"Elfa AI API. {_TWEET_DETAILS}"
    ),
    success_text="Retrieved top tweets for the {ticker}:",
    failure_text="Failed to get top mentions for provided ticker from Elfa AI API.",
    invalid_text="Unable to process get top mentions for the requested ticker. Invalid content provided.",
    invalid_error="Invalid get top mentions content",
    examples=(
        ActionExample(
            user="get top mentions for SOL",
            agent="Top mentions for the ticker SOL are retrieved.",
        ),
    ),
)

SEARCH_MENTIONS = ActionDescriptor(
    name="ELFA_SEARCH_MENTIONS_BY_KEYWORDS",
    similes=("search mentions", "find mentions by keywords", "tweets by keywords"),
    description="Searches for tweets by keywords within a specified date range using the Elfa AI API.",
    path="/v1/mentions/search",
    fields=(
        FieldSpec(
            name="keywords",
            type="string",
            description="Keywords to search for, separated by commas.",
            required=True,
            example="ai agents",
            min_length=1,
        ),
        FieldSpec(
            name="from",
            type="number",
            description="Start date as unix timestamp.",
            required=True,
            example=1738675001,
        ),
        FieldSpec(
            name="to",
            type="number",
            description="End date as unix timestamp.",
            required=True,
            example=1738775001,
        ),
        FieldSpec(
            name="limit",
            type="number",
            description="Number of tweets to retrieve (default: 20).",
            default=20,
        ),
    ),
    schema_name="getSearchMentionsByKeywordsSchema",
    schema_description=(
        "Schema for searching for tweets by keywords within a specified date range using the Elfa AI API"
    ),
    extraction_subject="about the requested search mentions by keywords",
    summary_instruction=(
        f"Extracted information and summarize the tweets for keywords from the Elfa AI API. {_TWEET_DETAILS}"
    ),
    success_text="Retrieved tweets for the {keywords} keywords from the Elfa AI API:",
    failure_text="Failed to get tweets for the mentioned keywords from Elfa AI API.",
    invalid_text="Unable to search for tweets by the keywords provided. Invalid content provided.",
    invalid_error="Invalid get search mentions by keywords content",
    examples=(
        ActionExample(
            user="search mentions for ai agents between 1738675001 and 1738775001",
            agent="Search mentions by keywords completed successfully",
        ),
    ),
)

TRENDING_TOKENS = ActionDescriptor(
    name="ELFA_GET_TRENDING_TOKENS",
    similes=("trending tokens", "get trending tokens", "fetch trending tokens"),
    description="Retrieves trending tokens based on mentions from the Elfa AI API.",
    path="/v1/trending-tokens",
    fields=(
        FieldSpec(
            name="timeWindow",
            type="string",
            description="Time window for mentions.",
            default="24h",
            min_length=2,
        ),
        FieldSpec(name="page", type="number", description="Page number for pagination.", default=1),
        FieldSpec(name="pageSize", type="number", description="Number of tokens per page.", default=50),
        FieldSpec(
            name="minMentions",
            type="number",
            description="Minimum number of mentions for a token to be considered trending.",
            default=5,
        ),
    ),
    schema_name="getTrendingTokensSchema",
    schema_description="Schema for getting trending tokens based on mentions from Elfa AI API",
    extraction_subject="about the trending tokens",
    summary_instruction=(
        "Extracted information and summarize the trending tokens by twitter mentions from the Elfa AI API."
    ),
    success_text="Retrieves trending tokens by twitter mentions from the Elfa AI API:",
    failure_text="Failed to get trending tokens from Elfa AI API.",
    invalid_text="Unable to process get trending tokens request. Invalid content provided.",
    invalid_error="Invalid get trending tokens content",
    examples=(ActionExample(user="get trending tokens", agent="Trending tokens retrieved successfully"),),
)

ACCOUNT_STATS = ActionDescriptor(
    name="ELFA_TWITTER_ACCOUNT_STATS",
    similes=("account smart stats", "smart stats", "twitter account stats", "smart twitter stats"),
    description="Retrieves smart stats and social metrics for a specified Twitter account from the Elfa AI API.",
    path="/v1/account/smart-stats",
    fields=(
        FieldSpec(
            name="username",
            type="string",
            description="Twitter username to retrieve smart account stats for.",
            required=True,
            example="elonmusk",
            min_length=1,
        ),
    ),
    schema_name="getTwitterAccountStatsSchema",
    schema_description=(
        "Schema for retrieving smart twitter account stats for a specific username using the Elfa AI API"
    ),
    extraction_subject="for the requested Twitter account smart stats",
    summary_instruction="Extracted information and summarize the smart account stats for provided username {username}",
    success_text="Retrieved twitter account data for {username} from the Elfa AI API:",
    failure_text="Failed to get twitter account data for the mentioned username from Elfa AI API.",
    invalid_text="Unable to retrieve twitter account stats for the provided username. Invalid content provided.",
    invalid_error="Invalid get twitter account stats content",
    examples=(
        ActionExample(
            user="get smart stats for Twitter account",
            agent="Retrieved twitter account data completed successfully",
        ),
    ),
)

ELFA_ACTION_DESCRIPTORS: tuple[ActionDescriptor, ...] = (
    PING,
    API_KEY_STATUS,
    SMART_MENTIONS,
    TOP_MENTIONS,
    SEARCH_MENTIONS,
    TRENDING_TOKENS,
    ACCOUNT_STATS,
)
