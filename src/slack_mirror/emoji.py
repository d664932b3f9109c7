"""Slack emoji short codes and their Unicode equivalents."""

from __future__ import annotations

EMOJI_CODEMAP: dict[str, str] = {
    ":+1:": "👍",
    ":-1:": "👎",
    ":100:": "💯",
    ":alarm_clock:": "⏰",
    ":angry:": "😠",
    ":anguished:": "😧",
    ":ant:": "🐜",
    ":apple:": "🍎",
    ":astonished:": "😲",
    ":b:": "🅱️",
    ":baby:": "👶",
    ":balloon:": "🎈",
    ":bangbang:": "‼️",
    ":beer:": "🍺",
    ":beers:": "🍻",
    ":bell:": "🔔",
    ":birthday:": "🎂",
    ":blue_heart:": "💙",
    ":blush:": "😊",
    ":bomb:": "💣",
    ":book:": "📖",
    ":boom:": "💥",
    ":broken_heart:": "💔",
    ":bug:": "🐛",
    ":bulb:": "💡",
    ":cake:": "🍰",
    ":calendar:": "📆",
    ":cat:": "🐱",
    ":chart_with_upwards_trend:": "📈",
    ":chart_with_downwards_trend:": "📉",
    ":clap:": "👏",
    ":clipboard:": "📋",
    ":clock1:": "🕐",
    ":cloud:": "☁️",
    ":coffee:": "☕",
    ":computer:": "💻",
    ":confused:": "😕",
    ":construction:": "🚧",
    ":cookie:": "🍪",
    ":cool:": "🆒",
    ":cry:": "😢",
    ":crying_cat_face:": "😿",
    ":dart:": "🎯",
    ":disappointed:": "😞",
    ":dizzy:": "💫",
    ":dog:": "🐶",
    ":dollar:": "💵",
    ":door:": "🚪",
    ":email:": "📧",
    ":exclamation:": "❗",
    ":expressionless:": "😑",
    ":eyes:": "👀",
    ":facepunch:": "👊",
    ":fearful:": "😨",
    ":fire:": "🔥",
    ":fireworks:": "🎆",
    ":fist:": "✊",
    ":flushed:": "😳",
    ":frowning:": "😦",
    ":gem:": "💎",
    ":ghost:": "👻",
    ":gift:": "🎁",
    ":grey_question:": "❔",
    ":grimacing:": "😬",
    ":grin:": "😁",
    ":grinning:": "😀",
    ":hammer:": "🔨",
    ":hand:": "✋",
    ":hankey:": "💩",
    ":heart:": "❤️",
    ":heart_eyes:": "😍",
    ":heavy_check_mark:": "✔️",
    ":heavy_minus_sign:": "➖",
    ":heavy_plus_sign:": "➕",
    ":hourglass:": "⌛",
    ":hugging_face:": "🤗",
    ":hushed:": "😯",
    ":innocent:": "😇",
    ":joy:": "😂",
    ":key:": "🔑",
    ":kissing:": "😗",
    ":laughing:": "😆",
    ":link:": "🔗",
    ":lock:": "🔒",
    ":loudspeaker:": "📢",
    ":mag:": "🔍",
    ":mask:": "😷",
    ":memo:": "📝",
    ":metal:": "🤘",
    ":money_with_wings:": "💸",
    ":moneybag:": "💰",
    ":monkey:": "🐒",
    ":muscle:": "💪",
    ":neutral_face:": "😐",
    ":no_entry:": "⛔",
    ":no_mouth:": "😶",
    ":ok:": "🆗",
    ":ok_hand:": "👌",
    ":open_mouth:": "😮",
    ":package:": "📦",
    ":palm_tree:": "🌴",
    ":paperclip:": "📎",
    ":partying_face:": "🥳",
    ":pencil:": "📝",
    ":pensive:": "😔",
    ":persevere:": "😣",
    ":phone:": "☎️",
    ":pizza:": "🍕",
    ":point_down:": "👇",
    ":point_left:": "👈",
    ":point_right:": "👉",
    ":point_up:": "☝️",
    ":poop:": "💩",
    ":pray:": "🙏",
    ":punch:": "👊",
    ":purple_heart:": "💜",
    ":question:": "❓",
    ":rage:": "😡",
    ":raised_hands:": "🙌",
    ":recycle:": "♻️",
    ":red_circle:": "🔴",
    ":relaxed:": "☺️",
    ":relieved:": "😌",
    ":rocket:": "🚀",
    ":rofl:": "🤣",
    ":rotating_light:": "🚨",
    ":scream:": "😱",
    ":see_no_evil:": "🙈",
    ":shipit:": "🐿️",
    ":shrug:": "🤷",
    ":skull:": "💀",
    ":sleeping:": "😴",
    ":sleepy:": "😪",
    ":slightly_smiling_face:": "🙂",
    ":slightly_frowning_face:": "🙁",
    ":smile:": "😄",
    ":smiley:": "😃",
    ":smirk:": "😏",
    ":sob:": "😭",
    ":sparkles:": "✨",
    ":sparkling_heart:": "💖",
    ":speech_balloon:": "💬",
    ":star:": "⭐",
    ":star2:": "🌟",
    ":stuck_out_tongue:": "😛",
    ":stuck_out_tongue_winking_eye:": "😜",
    ":sun_with_face:": "🌞",
    ":sunglasses:": "😎",
    ":sunny:": "☀️",
    ":sweat:": "😓",
    ":sweat_smile:": "😅",
    ":tada:": "🎉",
    ":thinking_face:": "🤔",
    ":thought_balloon:": "💭",
    ":thumbsdown:": "👎",
    ":thumbsup:": "👍",
    ":tired_face:": "😫",
    ":tongue:": "👅",
    ":trophy:": "🏆",
    ":turtle:": "🐢",
    ":two_hearts:": "💕",
    ":umbrella:": "☔",
    ":unamused:": "😒",
    ":unlock:": "🔓",
    ":upside_down_face:": "🙃",
    ":v:": "✌️",
    ":warning:": "⚠️",
    ":wave:": "👋",
    ":weary:": "😩",
    ":white_check_mark:": "✅",
    ":wink:": "😉",
    ":worried:": "😟",
    ":wrench:": "🔧",
    ":x:": "❌",
    ":yellow_heart:": "💛",
    ":yum:": "😋",
    ":zap:": "⚡",
    ":zipper_mouth_face:": "🤐",
    ":zzz:": "💤",
}
