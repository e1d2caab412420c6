"""
Script Template Catalog
Fixed length profiles, content templates and title phrasings used by the
script generator. Every table is keyed by an enum and covers all members.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from app.schemas.script import ContentType, ScriptLength


@dataclass(frozen=True)
class LengthProfile:
    """Word count, duration range and number of main points for a length"""
    word_count: int
    min_minutes: int
    max_minutes: int
    point_count: int

    @property
    def duration_label(self) -> str:
        return f"{self.min_minutes}-{self.max_minutes} minutes"


@dataclass(frozen=True)
class ContentTemplate:
    """Text skeleton with {topic}, {audience} and {duration} slots"""
    hook: str
    intro: str
    main_points: Tuple[str, ...]
    key_takeaways: Tuple[str, ...]
    outro: str
    call_to_action: str


LENGTH_PROFILES: Dict[ScriptLength, LengthProfile] = {
    ScriptLength.SHORT: LengthProfile(word_count=800, min_minutes=4, max_minutes=6, point_count=3),
    ScriptLength.MEDIUM: LengthProfile(word_count=1800, min_minutes=10, max_minutes=12, point_count=5),
    ScriptLength.LONG: LengthProfile(word_count=3500, min_minutes=20, max_minutes=25, point_count=7),
}


CONTENT_TEMPLATES: Dict[ContentType, ContentTemplate] = {
    ContentType.TUTORIAL: ContentTemplate(
        hook=(
            "Are you struggling with {topic}? You're not alone. In the next {duration}, "
            "I'm going to show you exactly how to master this, step by step, with real examples that actually work."
        ),
        intro=(
            "Welcome back to the channel! Today we're diving deep into {topic}, and I promise this isn't going to be "
            "another surface-level overview. I've spent months researching this, testing different approaches, and "
            "I'm going to share everything I've learned - including the mistakes you need to avoid. Whether you're a "
            "{audience} or someone who's been struggling with this for a while, by the end of this video, you'll have "
            "a clear roadmap to success."
        ),
        main_points=(
            "Let's start with the fundamentals - what exactly is {topic} and why does it matter more than most people "
            "realize? I'll break down the core concepts in simple terms.",
            "The biggest misconceptions people have about {topic}. I see these mistakes everywhere, and they're "
            "costing people time, money, and results.",
            "My proven step-by-step framework for {topic}. This is the exact process I use, and I'll walk you through "
            "each stage with real examples.",
            "Advanced strategies that separate beginners from experts. These are the techniques that most tutorials "
            "don't cover, but they make all the difference.",
            "Common pitfalls and how to avoid them. I'll share the mistakes I made so you don't have to, plus warning "
            "signs to watch out for.",
            "Tools and resources that will accelerate your progress. I'll show you my complete toolkit, including free "
            "alternatives to expensive software.",
            "Real-world case studies and success stories. Let's look at how others have applied these principles and "
            "the results they achieved.",
        ),
        key_takeaways=(
            "Understanding the core principles of {topic} is more important than memorizing techniques",
            "Consistency and practice beat perfection every time",
            "The right tools can accelerate your progress, but they're not a substitute for understanding",
            "Learning from others' mistakes is faster than making them yourself",
        ),
        outro=(
            "And there you have it - everything you need to know about {topic}. But here's the thing: knowledge "
            "without action is worthless. I want you to pick one thing from this video and implement it this week. "
            "Just one thing. Then come back and let me know how it went in the comments."
        ),
        call_to_action=(
            "If this helped you with {topic}, smash that like button - it really helps the algorithm show this to "
            "more people who need it. Subscribe if you want more in-depth tutorials like this, and hit the bell so "
            "you don't miss anything. I've got some exciting content coming up that builds on what we covered today."
        ),
    ),
    ContentType.ANALYSIS: ContentTemplate(
        hook=(
            "Everyone's talking about {topic}, but nobody's asking the right questions. Today, we're going beyond "
            "the headlines to uncover what's really happening and what it means for you."
        ),
        intro=(
            "What's up everyone! The internet is buzzing about {topic}, and honestly, most of the coverage is missing "
            "the point. I've been researching this for weeks, diving into data that most people aren't looking at, "
            "and what I found will probably surprise you. This isn't just another hot take - we're going to analyze "
            "this properly, look at the evidence, and figure out what this actually means for the future."
        ),
        main_points=(
            "Let's establish the facts first. What exactly is happening with {topic}? I'll break down the key "
            "developments and separate signal from noise.",
            "The historical context everyone's ignoring. To understand where we're going, we need to understand how "
            "we got here.",
            "The data tells a different story than the headlines. Let me show you the numbers that matter and what "
            "they really mean.",
            "Who benefits and who loses? Every change creates winners and losers - let's identify them and "
            "understand their motivations.",
            "The ripple effects nobody's talking about. This impacts way more than you think, and I'll connect the "
            "dots.",
            "What the experts are getting wrong. I'll challenge some popular opinions with evidence and logic.",
            "My predictions for what happens next, based on patterns and precedents, not wishful thinking.",
        ),
        key_takeaways=(
            "The situation is more complex than most media coverage suggests",
            "Historical patterns can help predict future outcomes",
            "Follow the incentives to understand the real motivations",
            "Second-order effects are often more important than first-order effects",
        ),
        outro=(
            "So what's the bottom line? {topic} is going to continue evolving, and the people who understand the "
            "deeper dynamics will be better positioned to adapt. This isn't about being right or wrong - it's about "
            "being prepared."
        ),
        call_to_action=(
            "What do you think about {topic}? Am I missing something important? Drop your analysis in the comments - "
            "I read every single one and often feature the best insights in follow-up videos. Like if this gave you "
            "a new perspective, and subscribe for more deep dives like this."
        ),
    ),
    ContentType.STORY: ContentTemplate(
        hook=(
            "This story about {topic} sounds impossible, but I have the receipts. What happened next changed "
            "everything I thought I knew."
        ),
        intro=(
            "Hey everyone! I've been debating whether to share this story for months, but after everything that's "
            "happened, I think you need to hear it. This is about {topic}, but it's really about how one moment can "
            "completely shift your perspective. Grab some popcorn because this gets wild."
        ),
        main_points=(
            "Let me set the scene. This is where it all started, and honestly, I had no idea what I was getting into.",
            "The first sign something was different. Looking back, this should have been a red flag, but at the "
            "time, I was too excited to notice.",
            "The moment everything changed. This is where the story takes a turn that nobody saw coming, including me.",
            "The challenges nobody warns you about. This is the part they don't show in the highlight reels.",
            "The breakthrough that made it all worth it. After everything we'd been through, this moment was pure "
            "magic.",
            "The lessons I learned that you can't get from books or courses. Real wisdom only comes from real "
            "experience.",
            "How this experience completely changed my approach to {topic} and life in general.",
        ),
        key_takeaways=(
            "Sometimes the best opportunities come disguised as problems",
            "Your biggest failures often lead to your biggest breakthroughs",
            "Trust the process, even when you can't see the destination",
            "The journey teaches you more than the destination ever could",
        ),
        outro=(
            "And that's how {topic} completely changed my life. I know it sounds dramatic, but sometimes life is "
            "dramatic. The point isn't the specific details - it's that you never know which experience will be the "
            "one that changes everything."
        ),
        call_to_action=(
            "Have you had a similar experience with {topic}? I'd love to hear your story in the comments. And if "
            "this resonated with you, hit that like button and subscribe - I share more personal stories and lessons "
            "learned on this channel."
        ),
    ),
    ContentType.REVIEW: ContentTemplate(
        hook=(
            "I spent months putting {topic} through its paces so you don't have to. Some of what I found was "
            "impressive, and some of it was a real letdown."
        ),
        intro=(
            "Welcome back! Today's video is an honest, no-sponsor review of {topic}. I'm going to cover what it "
            "promises, how it actually performs, and who it's really for. If you're a {audience} trying to decide "
            "whether it's worth your time and money, stick around until the end for my final verdict."
        ),
        main_points=(
            "First impressions of {topic}. Here's what stood out right away, for better and for worse.",
            "What {topic} promises versus what it actually delivers. I tested every headline claim.",
            "The features that genuinely impressed me, and why they matter in day-to-day use.",
            "The weaknesses nobody mentions in the sponsored reviews. These are the deal-breakers to watch for.",
            "How it compares to the main alternatives, including cheaper options that might suit you better.",
            "Value for money. I'll break down the real cost once you factor in time, upkeep and extras.",
            "Who should get it, who should skip it, and what I'd do differently if I started again.",
        ),
        key_takeaways=(
            "{topic} shines in a few specific situations, not every situation",
            "Marketing claims deserve to be tested before you commit",
            "The best choice depends on your experience level and budget",
            "Long-term value matters more than first impressions",
        ),
        outro=(
            "So is {topic} worth it? For the right person, absolutely - but now you know exactly where it falls "
            "short, so you can make that call for yourself instead of trusting the hype."
        ),
        call_to_action=(
            "Have you tried {topic}? Tell me whether you agree with my verdict in the comments. If this review saved "
            "you some time or money, give it a like and subscribe for more honest reviews."
        ),
    ),
    ContentType.INTERVIEW: ContentTemplate(
        hook=(
            "What does someone who has spent years working on {topic} know that the rest of us don't? Today I got "
            "to ask them directly, and their answers surprised me."
        ),
        intro=(
            "Welcome to the channel! Today's episode is a conversation with an expert who lives and breathes "
            "{topic}. We talked about how they got started, what they wish they'd known earlier, and what's coming "
            "next. Whether you're a {audience} or a seasoned pro, there's something in here for you."
        ),
        main_points=(
            "How our guest first got into {topic}, and the moment they knew it was more than a passing interest.",
            "The biggest mistake they see newcomers make, and the simple habit that fixes it.",
            "A behind-the-scenes look at how they approach {topic} day to day.",
            "The controversial opinion they hold that most of their peers disagree with.",
            "The tools, books and people that shaped their thinking the most.",
            "Where they think the field is heading over the next few years.",
            "Rapid-fire questions from the community, answered without a script.",
        ),
        key_takeaways=(
            "Experts still rely on fundamentals more than shortcuts",
            "Mistakes early on are part of the path, not a detour from it",
            "Surrounding yourself with the right people accelerates growth",
            "The future of {topic} rewards those who keep learning",
        ),
        outro=(
            "That's a wrap on today's conversation about {topic}. I learned a ton, and I hope you picked up at least "
            "one idea you can use right away."
        ),
        call_to_action=(
            "Who should I interview next about {topic}? Leave your suggestions and questions in the comments. If you "
            "enjoyed this conversation, like the video and subscribe so you catch the next episode."
        ),
    ),
}


TITLE_TEMPLATES: Dict[ContentType, Tuple[str, ...]] = {
    ContentType.TUTORIAL: (
        "The Complete {topic} Guide (Step-by-Step)",
        "Master {topic} in {year}: Everything You Need to Know",
        "{topic} Tutorial: From Beginner to Expert",
        "How to {topic}: The Ultimate Guide",
    ),
    ContentType.ANALYSIS: (
        "{topic}: What Everyone Gets Wrong",
        "The Truth About {topic} (Data Analysis)",
        "{topic} Explained: Beyond the Headlines",
        "Why {topic} Changes Everything",
    ),
    ContentType.STORY: (
        "How {topic} Changed My Life",
        "My {topic} Journey: Failures, Breakthroughs & Lessons",
        "The {topic} Story Nobody Talks About",
        "What {topic} Taught Me About Success",
    ),
    ContentType.REVIEW: (
        "{topic}: Honest Review After 6 Months",
        "Is {topic} Worth It? Complete Breakdown",
        "{topic} Review: The Good, Bad & Ugly",
        "Testing {topic} So You Don't Have To",
    ),
    ContentType.INTERVIEW: (
        "Expert Reveals {topic} Secrets",
        "Inside {topic} with Industry Leader",
        "{topic} Masterclass: Expert Interview",
        "Exclusive: {topic} Insights from the Pros",
    ),
}


SEO_KEYWORD_TEMPLATES: Tuple[str, ...] = (
    "{topic}",
    "{topic} tutorial",
    "how to {topic}",
    "{topic} guide",
    "{topic} tips",
    "{topic} {year}",
)


def get_length_profile(length: ScriptLength) -> LengthProfile:
    return LENGTH_PROFILES[ScriptLength(length)]


def get_content_template(content_type: ContentType) -> ContentTemplate:
    return CONTENT_TEMPLATES[ContentType.resolve(content_type)]


def get_title_templates(content_type: ContentType) -> Tuple[str, ...]:
    return TITLE_TEMPLATES[ContentType.resolve(content_type)]
