"""Word lists that the random generators draw from."""

from __future__ import annotations

CAR_BRANDS: dict[str, tuple[str, ...]] = {
    "zh_CN": (
        "雪弗兰", "保时捷", "瑞麒", "北汽福田", "日产", "海马", "达西亚", "斯堪尼亚", "林肯",
        "道奇", "西亚特", "标致", "帝豪", "荣威", "宇通", "嘎斯", "大金龙", "夏利", "帕加尼",
        "起亚", "上汽", "斯巴鲁", "雷克萨斯", "欧宝", "本田", "劳斯莱斯", "奔腾", "别克", "霍顿",
        "威麟", "兰博基尼", "福特", "理念", "丰田", "玛莎拉蒂", "法拉利", "长安", "吉利",
        "凯佰赫", "东风", "雪铁龙", "西尔贝", "迈巴赫", "现代", "启辰", "马科斯", "迈凯伦",
        "奔驰", "众泰", "斯柯达", "特斯拉", "英菲尼迪", "三菱", "三星", "大众", "江淮", "华晨",
        "力帆", "红旗", "吉列塔", "雷诺", "宝腾", "奥斯汀", "宝马", "一汽", "奥迪", "宝骏",
        "厦门金龙", "沃尔沃", "东风风神", "克莱斯勒", "宾利", "凯迪拉克", "大宇", "奇瑞",
        "阿尔法罗密欧", "MINI", "路虎", "讴歌", "菲亚特", "悍马", "全球鹰", "长城", "布加迪",
        "雪铁龙", "名爵", "捷豹", "阿斯顿马丁", "铃木", "马自达", "大发", "解放", "比亚迪",
        "特斯拉", "小米", "蔚来", "理想", "极氪", "小鹏", "零跑", "长安新能源", "广汽埃安",
        "奇瑞新能源", "东风风行", "上汽大通", "江淮新能源", "北汽新能源", "长安欧尚", "广汽传祺",
        "东南汽车", "一汽丰田", "一汽马自达", "一汽大众", "一汽丰田", "一汽奥迪", "一汽奔腾",
        "一汽吉林", "一汽解放",
    ),
    "en_US": (
        "BenZ", "BMW", "Audi", "Ford", "Chevrolet", "Toyota", "Honda", "Nissan", "Hyundai",
        "Kia", "Volkswagen", "Subaru", "Mazda", "Porsche", "Lexus", "Jaguar", "Land Rover",
        "Volvo", "Fiat", "Peugeot", "Renault", "Dodge", "Chrysler", "Buick", "Cadillac",
        "Lincoln", "Mitsubishi", "Infiniti", "Acura", "Tesla", "BYD", "Xpeng", "NIO",
        "Li Auto", "Geely", "SAIC", "Great Wall", "Changan", "GAC", "Dongfeng",
    ),
}

COLORS: dict[str, tuple[str, ...]] = {
    "zh_CN": (
        "黑色", "栗色", "白色", "绿色", "紫色", "蓝色", "银色", "灰色", "黄色", "淡黄色",
        "绿黄色", "紫红色", "水绿色", "天蓝色", "橄榄色",
    ),
    "en_US": (
        "black", "maroon", "green", "navy", "olive", "purple", "teal", "lime", "blue",
        "silver", "gray", "yellow", "fuchsia", "aqua", "white",
    ),
}

COMPUTER: dict[str, tuple[str, ...]] = {
    "linux_processor": ("i686", "x86_64"),
    "mac_processor": ("Intel", "PPC", "U; Intel", "U; PPC"),
    "windows_platform": (
        "Windows NT 6.2", "Windows NT 6.1", "Windows NT 6.0", "Windows NT 5.2",
        "Windows NT 5.1", "Windows NT 5.01", "Windows NT 5.0", "Windows NT 4.0",
        "Windows 98; Win 9x 4.90", "Windows 98", "Windows 95", "Windows CE",
    ),
}

EMAILS: dict[str, tuple[str, ...]] = {
    "postfix": (
        "@163.com", "@hotmail.com", "@126.cn", "@gmail.com", "@foxmail.com", "@qq.com",
        "@sdu.edu.cn", "@123.com", "@yahoo.com", "@msn.com", "@github.com", "@ask.com",
        "@live.com", "@0355.net", "@139.net", "@126.net", "@3721.net", "@yeah.com",
    ),
}

FLIGHTS: dict[str, tuple[str, ...]] = {
    "airline_code": (
        "CZ", "OQ", "3U", "NS", "8C", "CA", "SC", "MF", "EU", "ZH", "VD", "FM", "KN", "MU",
        "HU", "CN", "8L", "PN", "GS", "HO", "BK", "G5", "9C", "JD", "CX", "KA", "HX", "UO",
        "O8", "NX", "BR", "CI", "AE", "B7", "GE", "EF",
    ),
    "airline_name": (
        "南方航空 ", "重庆航空", "四川航空", "东北航空", "东星航空", "国际航空", "山东航空",
        "厦门航空", "鹰联航空", "深圳航空", "鲲鹏航空", "上海航空", "联合航空", "东方航空",
        "海南航空", "新华航空", "翔鹏航空", "西部航空", "大新华快运", "吉祥航空", "奥凯航空",
        "华夏航空", "春秋航空", "金鹿航空", "国泰航空", "港龙航空", "香港航空", "香港快运航空",
        "甘泉香港航空", "澳门航空", "长荣航空", "中华航空", "华信航空", "立荣航空", "复兴航空",
        "远东航空",
    ),
    "airline_info": (
        "code=CZ,name=南方航空 ", "code=OQ,name=重庆航空", "code=3U,name=四川航空",
        "code=NS,name=东北航空", "code=8C,name=东星航空", "code=CA,name=国际航空",
        "code=SC,name=山东航空", "code=MF,name=厦门航空", "code=EU,name=鹰联航空",
        "code=ZH,name=深圳航空", "code=VD,name=鲲鹏航空", "code=FM,name=上海航空",
        "code=KN,name=联合航空", "code=MU,name=东方航空", "code=HU,name=海南航空",
        "code=CN,name=新华航空", "code=8L,name=翔鹏航空", "code=PN,name=西部航空",
        "code=GS,name=大新华快运", "code=HO,name=吉祥航空", "code=BK,name=奥凯航空",
        "code=G5,name=华夏航空", "code=9C,name=春秋航空", "code=JD,name=金鹿航空",
        "code=CX,name=国泰航空", "code=KA,name=港龙航空", "code=HX,name=香港航空",
        "code=UO,name=香港快运航空", "code=O8,name=甘泉香港航空", "code=NX,name=澳门航空",
        "code=BR,name=长荣航空", "code=CI,name=中华航空", "code=AE,name=华信航空",
        "code=B7,name=立荣航空", "code=GE,name=复兴航空", "code=EF,name=远东航空",
    ),
}

GENDERS: dict[str, tuple[str, ...]] = {
    "zh_CN": ("男", "女"),
    "en_US": ("male", "female"),
}

INTERNET: dict[str, tuple[str, ...]] = {
    "browser": ("firefox", "chrome", "internetExplorer", "opera", "safari"),
    "domain_suffix": ("com", "biz", "info", "name", "net", "org", "io", "live", "tv"),
    "http_method": ("HEAD", "GET", "POST", "PUT", "PATCH", "DELETE"),
}

SEATS: dict[str, tuple[str, ...]] = {
    "train": ("A", "B", "D", "E", "F"),
    "flight": ("A", "B", "D", "E", "F", "G", "H", "J", "K"),
}

TRAINS: dict[str, tuple[str, ...]] = {
    "prefix": ("G", "C", "D", "T", "K", "Z", "L", "Y", ""),
}

STATUS_CODES: dict[str, tuple[int, ...]] = {
    "simple": (200, 301, 302, 400, 404, 500),
    "general": (
        100, 200, 201, 203, 204, 205, 301, 302, 304, 400, 401, 403, 404, 405, 406, 416,
        500, 501, 502, 503, 504,
    ),
}

DATA: dict[str, dict[str, tuple[str, ...]]] = {
    "internet": INTERNET,
    "color": COLORS,
    "computer": COMPUTER,
    "gender": GENDERS,
    "email": EMAILS,
    "flight": FLIGHTS,
    "train": TRAINS,
    "seat": SEATS,
    "carbrand": CAR_BRANDS,
}

INT_DATA: dict[str, dict[str, tuple[int, ...]]] = {
    "status_code": STATUS_CODES,
}


def has_values(category: str, key: str | None = None) -> bool:
    """Tell whether DATA holds the category, and the key within it when one is given."""
    group = DATA.get(category)
    if group is None:
        return False
    return key is None or key in group