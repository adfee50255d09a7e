"""
Static place hierarchy used by the location resolver.

Each key is a canonical lowercase place name. Entries may list children under
"regions", "states", "emirates", "cities" or "areas"; a child that has no entry
of its own becomes a leaf of the matching kind. "aliases" are emitted as
search patterns, "codes" (short abbreviations) are only recognised as input.
"""

GAZETTEER = {
    # ===================================
    # ASIA: India
    # ===================================
    "india": {
        "kind": "country",
        "aliases": ["indian", "bharat", "hindustan"],
        "states": [
            # North
            "delhi", "haryana", "punjab", "himachal pradesh", "uttarakhand",
            "jammu and kashmir", "ladakh", "chandigarh",
            # South
            "tamil nadu", "karnataka", "kerala", "andhra pradesh", "telangana",
            "puducherry", "lakshadweep",
            # West
            "maharashtra", "gujarat", "rajasthan", "goa", "daman and diu",
            "dadra and nagar haveli",
            # East
            "west bengal", "odisha", "bihar", "jharkhand", "sikkim",
            # Northeast
            "assam", "arunachal pradesh", "nagaland", "manipur", "mizoram",
            "tripura", "meghalaya",
            # Central
            "madhya pradesh", "chhattisgarh", "uttar pradesh",
        ],
    },
    "tamil nadu": {
        "kind": "state",
        "aliases": ["tamilnadu"],
        "codes": ["tn"],
        "cities": [
            "chennai", "coimbatore", "madurai", "tiruchirappalli", "salem",
            "tiruppur", "erode", "tirunelveli", "vellore", "thoothukudi",
            "dindigul", "thanjavur", "ranipet", "sivakasi", "karur",
            "udhagamandalam", "hosur", "nagercoil", "kanchipuram", "kumbakonam",
            "tiruvannamalai", "pollachi", "rajapalayam", "gudiyatham",
            "pudukkottai", "avadi",
        ],
    },
    "chennai": {
        "kind": "city",
        "aliases": ["madras", "chennai city"],
        "areas": [
            "t nagar", "anna nagar", "adyar", "velachery", "omr", "tambaram",
            "chrompet", "porur", "sholinganallur", "perungudi", "guindy",
            "mylapore",
        ],
    },
    "tiruchirappalli": {"kind": "city", "aliases": ["trichy"]},
    "tiruppur": {"kind": "city", "aliases": ["tirupur"]},
    "thoothukudi": {"kind": "city", "aliases": ["tuticorin"]},
    "udhagamandalam": {"kind": "city", "aliases": ["ooty"]},
    "karnataka": {
        "kind": "state",
        "aliases": ["karnatakar"],
        "codes": ["ka"],
        "cities": [
            "bangalore", "mysuru", "mangaluru", "hubballi", "belagavi",
            "dharwad", "kalaburagi", "ballari", "vijayapura", "shivamogga",
            "tumakuru", "raichur", "davangere", "udupi", "hassan", "mandya",
        ],
    },
    "bangalore": {
        "kind": "city",
        "aliases": ["bengaluru", "bengaluru city"],
        "codes": ["blr"],
        "areas": [
            "whitefield", "electronic city", "koramangala", "indiranagar",
            "marathahalli", "jp nagar", "btm layout", "hsr layout", "jayanagar",
            "malleshwaram",
        ],
    },
    "mysuru": {"kind": "city", "aliases": ["mysore"]},
    "mangaluru": {"kind": "city", "aliases": ["mangalore"]},
    "hubballi": {"kind": "city", "aliases": ["hubli"]},
    "belagavi": {"kind": "city", "aliases": ["belgaum"]},
    "kalaburagi": {"kind": "city", "aliases": ["gulbarga"]},
    "ballari": {"kind": "city", "aliases": ["bellary"]},
    "vijayapura": {"kind": "city", "aliases": ["bijapur"]},
    "shivamogga": {"kind": "city", "aliases": ["shimoga"]},
    "tumakuru": {"kind": "city", "aliases": ["tumkur"]},
    "maharashtra": {
        "kind": "state",
        "codes": ["mh"],
        "cities": [
            "mumbai", "pune", "nagpur", "thane", "nashik", "aurangabad",
            "solapur", "amravati", "kolhapur", "sangli", "jalgaon", "akola",
            "latur", "dhule", "ahmednagar", "chandrapur", "parbhani",
            "ichalkaranji", "jalna", "bhiwandi", "navi mumbai", "kalyan",
            "vasai", "panvel",
        ],
    },
    "mumbai": {
        "kind": "city",
        "aliases": ["bombay", "mumbai city"],
        "areas": [
            "andheri", "bandra", "juhu", "worli", "powai", "goregaon", "malad",
            "borivali", "vashi", "kharghar",
        ],
    },
    "pune": {
        "kind": "city",
        "aliases": ["poona", "pune city"],
        "areas": [
            "hinjewadi", "wakad", "pimpri", "chinchwad", "kothrud",
            "shivajinagar", "koregaon park", "viman nagar", "hadapsar",
            "magarpatta",
        ],
    },
    "delhi": {
        "kind": "state",
        "aliases": ["nct of delhi", "delhi ncr", "national capital region"],
        "codes": ["ncr"],
        "cities": [
            "new delhi", "gurugram", "noida", "greater noida", "faridabad",
            "ghaziabad", "bahadurgarh", "sonipat", "rohtak", "panipat",
            "dwarka", "rohini", "pitampura", "janakpuri", "laxmi nagar", "saket",
        ],
    },
    "gurugram": {"kind": "city", "aliases": ["gurgaon"]},
    "west bengal": {
        "kind": "state",
        "aliases": ["bengal"],
        "codes": ["wb"],
        "cities": ["kolkata", "howrah", "durgapur", "asansol", "siliguri", "bardhaman"],
    },
    "kolkata": {"kind": "city", "aliases": ["calcutta"]},
    "gujarat": {
        "kind": "state",
        "codes": ["gj"],
        "cities": [
            "ahmedabad", "surat", "vadodara", "rajkot", "bhavnagar", "jamnagar",
            "gandhinagar",
        ],
    },
    "vadodara": {"kind": "city", "aliases": ["baroda"]},
    "rajasthan": {
        "kind": "state",
        "codes": ["rj"],
        "cities": ["jaipur", "jodhpur", "udaipur", "kota", "ajmer", "bikaner", "alwar"],
    },
    "telangana": {
        "kind": "state",
        "codes": ["ts"],
        "cities": [
            "hyderabad", "secunderabad", "warangal", "nizamabad", "karimnagar",
            "khammam",
        ],
    },
    "kerala": {
        "kind": "state",
        "codes": ["kl"],
        "cities": ["kochi", "thiruvananthapuram", "kozhikode", "thrissur", "kollam"],
    },
    "kochi": {"kind": "city", "aliases": ["cochin"]},
    "thiruvananthapuram": {"kind": "city", "aliases": ["trivandrum"]},
    "kozhikode": {"kind": "city", "aliases": ["calicut"]},
    # ===================================
    # MIDDLE EAST
    # ===================================
    "saudi arabia": {
        "kind": "country",
        "aliases": ["saudi", "kingdom of saudi arabia"],
        "codes": ["ksa"],
        "regions": [
            "eastern province", "riyadh region", "makkah region",
            "madinah region", "asir region", "tabuk region", "hail region",
            "northern borders", "jazan region", "najran region", "al bahah",
            "al jouf",
        ],
    },
    "eastern province": {
        "kind": "region",
        "aliases": ["eastern region", "ash sharqiyah"],
        "cities": [
            "dammam", "al khobar", "dhahran", "jubail", "al hofuf", "mubarraz",
            "al qatif", "ras tanura", "abqaiq", "khafji", "nairyah",
        ],
    },
    "riyadh region": {
        "kind": "region",
        "aliases": ["riyadh province"],
        "cities": ["riyadh", "al kharj", "diriyah", "majmaah"],
    },
    "makkah region": {
        "kind": "region",
        "aliases": ["mecca region", "makkah province"],
        "cities": ["jeddah", "makkah", "taif", "rabigh"],
    },
    "riyadh": {
        "kind": "city",
        "aliases": ["ar riyadh", "al riyadh", "riyad"],
        "areas": ["olaya", "al malaz", "diplomatic quarter", "al muraba"],
    },
    "jeddah": {
        "kind": "city",
        "aliases": ["jiddah", "jedda"],
        "areas": ["al balad", "al hamra", "al rawdah", "obhur"],
    },
    "makkah": {"kind": "city", "aliases": ["mecca"]},
    "taif": {"kind": "city", "aliases": ["al taif"]},
    "dammam": {"kind": "city", "aliases": ["ad dammam"]},
    "jubail": {"kind": "city", "aliases": ["al jubail", "al jubayl"]},
    "al khobar": {"kind": "city", "aliases": ["khobar"]},
    "al hofuf": {"kind": "city", "aliases": ["hofuf"]},
    "al qatif": {"kind": "city", "aliases": ["qatif"]},
    "al kharj": {"kind": "city", "aliases": ["kharj"]},
    "uae": {
        "kind": "country",
        "aliases": ["united arab emirates", "emirates"],
        "emirates": [
            "dubai", "abu dhabi", "sharjah", "ajman", "umm al quwain",
            "ras al khaimah", "fujairah",
        ],
    },
    "dubai": {
        "kind": "emirate",
        "aliases": ["dubayy"],
        "codes": ["dxb"],
        "areas": [
            "downtown dubai", "dubai marina", "jlt", "jbr", "deira", "bur dubai",
            "business bay",
        ],
    },
    "abu dhabi": {
        "kind": "emirate",
        "aliases": ["abudhabi", "abu zabi"],
        "areas": ["corniche", "al reem", "yas island", "saadiyat"],
    },
    "qatar": {
        "kind": "country",
        "aliases": ["katar", "state of qatar"],
        "cities": ["doha", "al wakrah", "al rayyan", "al khor", "mesaieed", "dukhan"],
    },
    "doha": {
        "kind": "city",
        "aliases": ["ad dawhah"],
        "areas": ["west bay", "the pearl", "lusail", "msheireb"],
    },
    "kuwait": {
        "kind": "country",
        "aliases": ["state of kuwait"],
        "cities": ["kuwait city", "hawalli", "salmiya", "farwaniya", "ahmadi", "jahra"],
    },
    "oman": {
        "kind": "country",
        "aliases": ["sultanate of oman"],
        "cities": ["muscat", "salalah", "sohar", "nizwa", "barka"],
    },
    "bahrain": {
        "kind": "country",
        "aliases": ["kingdom of bahrain"],
        "cities": ["manama", "muharraq", "riffa", "hamad town", "isa town", "sitra"],
    },
    # ===================================
    # NORTH AMERICA
    # ===================================
    "united states": {
        "kind": "country",
        "aliases": ["united states of america", "america"],
        "codes": ["us", "usa"],
        "states": [
            "california", "texas", "florida", "new york", "illinois",
            "pennsylvania", "ohio", "georgia", "north carolina", "michigan",
            "new jersey", "virginia",
        ],
    },
    "california": {
        "kind": "state",
        "aliases": ["calif"],
        "codes": ["ca"],
        "cities": [
            "los angeles", "san francisco", "san diego", "san jose",
            "sacramento", "fresno", "oakland", "long beach",
        ],
    },
    "los angeles": {"kind": "city", "codes": ["la"]},
    "san francisco": {"kind": "city", "codes": ["sf"]},
    "texas": {
        "kind": "state",
        "codes": ["tx"],
        "cities": ["houston", "dallas", "san antonio", "austin", "fort worth", "el paso"],
    },
    "canada": {
        "kind": "country",
        "codes": ["ca"],
        "regions": [
            "ontario", "quebec", "british columbia", "alberta", "manitoba",
            "saskatchewan",
        ],
    },
    # ===================================
    # EUROPE
    # ===================================
    "united kingdom": {
        "kind": "country",
        "aliases": ["britain", "great britain"],
        "codes": ["uk"],
        "regions": ["england", "scotland", "wales", "northern ireland"],
    },
    "england": {
        "kind": "region",
        "cities": [
            "london", "birmingham", "manchester", "liverpool", "leeds",
            "sheffield", "bristol",
        ],
    },
    "germany": {
        "kind": "country",
        "aliases": ["deutschland"],
        "codes": ["de"],
        "cities": [
            "berlin", "munich", "hamburg", "cologne", "frankfurt", "stuttgart",
            "dusseldorf",
        ],
    },
    "france": {
        "kind": "country",
        "codes": ["fr"],
        "cities": ["paris", "marseille", "lyon", "toulouse", "nice", "nantes", "bordeaux"],
    },
    # ===================================
    # SOUTHEAST & EAST ASIA
    # ===================================
    "singapore": {
        "kind": "country",
        "aliases": ["singapura"],
        "codes": ["sg"],
        "areas": ["orchard", "marina bay", "sentosa", "jurong"],
    },
    "malaysia": {
        "kind": "country",
        "codes": ["my"],
        "cities": [
            "kuala lumpur", "johor bahru", "george town", "penang", "ipoh",
            "petaling jaya",
        ],
    },
    "kuala lumpur": {"kind": "city", "codes": ["kl"]},
    "thailand": {
        "kind": "country",
        "aliases": ["siam"],
        "codes": ["th"],
        "cities": ["bangkok", "chiang mai", "phuket", "pattaya", "krabi", "hua hin"],
    },
    "china": {
        "kind": "country",
        "aliases": ["peoples republic of china"],
        "codes": ["prc"],
        "cities": [
            "beijing", "shanghai", "guangzhou", "shenzhen", "chengdu", "wuhan",
            "tianjin",
        ],
    },
    "japan": {
        "kind": "country",
        "aliases": ["nippon", "nihon"],
        "cities": ["tokyo", "osaka", "kyoto", "yokohama", "nagoya", "sapporo", "fukuoka"],
    },
    "south korea": {
        "kind": "country",
        "aliases": ["korea", "republic of korea"],
        "codes": ["rok"],
        "cities": ["seoul", "busan", "incheon", "daegu", "daejeon", "gwangju"],
    },
    # ===================================
    # OCEANIA
    # ===================================
    "australia": {
        "kind": "country",
        "aliases": ["aussie"],
        "codes": ["au"],
        "states": [
            "new south wales", "victoria", "queensland", "western australia",
            "south australia",
        ],
    },
    "new zealand": {
        "kind": "country",
        "aliases": ["aotearoa"],
        "codes": ["nz"],
        "cities": ["auckland", "wellington", "christchurch", "hamilton", "tauranga"],
    },
}
