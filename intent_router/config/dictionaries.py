"""Entity dictionaries for the four extractor categories.

Keyword lists are matched by substring containment against the normalized
query and must therefore be authored lower-case. Condition and symptom
tables are regular expressions; the matched text becomes the entity value.
"""

import re

# Ingredient names (Japanese / English)
INGREDIENT_KEYWORDS: tuple[str, ...] = (
    # Vitamins
    "ビタミン",
    "vitamin",
    "マルチビタミン",
    "multivitamin",
    "葉酸",
    "folic acid",
    "ナイアシン",
    "niacin",
    "パントテン酸",
    # Minerals
    "カルシウム",
    "calcium",
    "マグネシウム",
    "magnesium",
    "亜鉛",
    "zinc",
    "鉄",
    "iron",
    "セレン",
    "selenium",
    "クロム",
    "chromium",
    # Omega fatty acids
    "オメガ",
    "omega",
    "dha",
    "epa",
    "フィッシュオイル",
    "fish oil",
    # Amino acids / protein
    "プロテイン",
    "protein",
    "bcaa",
    "アミノ酸",
    "amino acid",
    "グルタミン",
    "glutamine",
    "クレアチン",
    "creatine",
    # Gut health
    "乳酸菌",
    "プロバイオティクス",
    "probiotics",
    "食物繊維",
    "fiber",
    # Other popular ingredients
    "コラーゲン",
    "collagen",
    "ルテイン",
    "lutein",
    "コエンザイム",
    "coq10",
    "アシュワガンダ",
    "ashwagandha",
    "メラトニン",
    "melatonin",
    "グルコサミン",
    "glucosamine",
    "コンドロイチン",
    "chondroitin",
)

# Product and brand names (Japanese / English)
PRODUCT_BRAND_KEYWORDS: tuple[str, ...] = (
    # Domestic brands
    "ネイチャーメイド",
    "nature made",
    "ディアナチュラ",
    "dear natura",
    "dhc",
    "ファンケル",
    "fancl",
    "アサヒ",
    "小林製薬",
    "大塚製薬",
    "オリヒロ",
    "orihiro",
    "nowフーズ",
    "now foods",
    # Overseas brands
    "iherb",
    "アイハーブ",
    "source naturals",
    "life extension",
    "jarrow",
    "thorne",
    "solgar",
    "garden of life",
    "nordic naturals",
    "california gold",
)

# Health and biographical circumstances
CONDITION_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        # Pregnancy / breastfeeding
        r"妊娠",
        r"授乳",
        r"妊婦",
        r"母乳",
        # Age
        r"子供",
        r"こども",
        r"高齢",
        r"年配",
        r"シニア",
        r"[0-9]+歳",
        # Medication / chronic illness
        r"服薬",
        r"薬を飲",
        r"持病",
        r"糖尿",
        r"高血圧",
        r"腎臓",
        r"肝臓",
        r"アレルギー",
        # Lifestyle
        r"ダイエット中",
        r"運動",
        r"トレーニング",
        r"筋トレ",
    )
)

# Subjective complaints
SYMPTOM_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        # Fatigue
        r"疲れ",
        r"だるい",
        r"しんどい",
        r"元気が(出|で)ない",
        # Sleep
        r"眠れない",
        r"不眠",
        r"睡眠",
        r"寝付",
        r"夜中に起き",
        # Skin / ageing
        r"肌荒れ",
        r"ニキビ",
        r"シミ",
        r"しわ",
        r"老化",
        r"エイジング",
        # Stress / mood
        r"ストレス",
        r"イライラ",
        r"不安",
        r"落ち込",
        r"集中(でき|力)",
        # Body
        r"冷え",
        r"むくみ",
        r"便秘",
        r"下痢",
        r"胃腸",
        r"関節",
        r"腰痛",
        r"頭痛",
        r"目の疲れ",
        r"眼精疲労",
        # Immunity
        r"免疫",
        r"風邪",
        r"体調",
    )
)
