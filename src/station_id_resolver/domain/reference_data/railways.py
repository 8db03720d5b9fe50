"""Station search line names mapped to ODPT railway identifiers (Tokyo area)."""

RAILWAY_MAPPING: dict[str, str] = {
    # JR East
    "JR山手線": "odpt.Railway:JR-East.Yamanote",
    "JR中央線": "odpt.Railway:JR-East.ChuoRapid",
    "JR中央線快速": "odpt.Railway:JR-East.ChuoRapid",
    "JR中央・総武線": "odpt.Railway:JR-East.ChuoSobuLocal",
    "JR中央・総武線各駅停車": "odpt.Railway:JR-East.ChuoSobuLocal",
    "JR京浜東北線": "odpt.Railway:JR-East.KeihinTohokuNegishi",
    "JR京浜東北・根岸線": "odpt.Railway:JR-East.KeihinTohokuNegishi",
    "JR埼京線": "odpt.Railway:JR-East.Saikyo",
    "JR常磐線": "odpt.Railway:JR-East.Joban",
    "JR常磐線快速": "odpt.Railway:JR-East.JobanRapid",
    "JR常磐線各駅停車": "odpt.Railway:JR-East.JobanLocal",
    "JR総武線快速": "odpt.Railway:JR-East.SobuRapid",
    "JR総武本線": "odpt.Railway:JR-East.SobuRapid",
    "JR湘南新宿ライン": "odpt.Railway:JR-East.ShonanShinjuku",
    "JR横須賀線": "odpt.Railway:JR-East.Yokosuka",
    "JR横浜線": "odpt.Railway:JR-East.Yokohama",
    "JR南武線": "odpt.Railway:JR-East.Nambu",
    "JR武蔵野線": "odpt.Railway:JR-East.Musashino",
    "JR鶴見線": "odpt.Railway:JR-East.Tsurumi",
    "JR五日市線": "odpt.Railway:JR-East.Itsukaichi",
    "JR青梅線": "odpt.Railway:JR-East.Ome",
    "JR高崎線": "odpt.Railway:JR-East.Takasaki",
    "JR宇都宮線": "odpt.Railway:JR-East.Utsunomiya",
    "JR京葉線": "odpt.Railway:JR-East.Keiyo",
    # Tokyo Metro
    "東京メトロ銀座線": "odpt.Railway:TokyoMetro.Ginza",
    "東京メトロ丸ノ内線": "odpt.Railway:TokyoMetro.Marunouchi",
    "東京メトロ丸ノ内線分岐線": "odpt.Railway:TokyoMetro.MarunouchiBranch",
    "東京メトロ日比谷線": "odpt.Railway:TokyoMetro.Hibiya",
    "東京メトロ東西線": "odpt.Railway:TokyoMetro.Tozai",
    "東京メトロ千代田線": "odpt.Railway:TokyoMetro.Chiyoda",
    "東京メトロ有楽町線": "odpt.Railway:TokyoMetro.Yurakucho",
    "東京メトロ半蔵門線": "odpt.Railway:TokyoMetro.Hanzomon",
    "東京メトロ南北線": "odpt.Railway:TokyoMetro.Namboku",
    "東京メトロ副都心線": "odpt.Railway:TokyoMetro.Fukutoshin",
    # Toei
    "都営大江戸線": "odpt.Railway:Toei.Oedo",
    "都営浅草線": "odpt.Railway:Toei.Asakusa",
    "都営三田線": "odpt.Railway:Toei.Mita",
    "都営新宿線": "odpt.Railway:Toei.Shinjuku",
    # Tokyu
    "東急東横線": "odpt.Railway:Tokyu.Toyoko",
    "東急田園都市線": "odpt.Railway:Tokyu.DenEnToshi",
    "東急目黒線": "odpt.Railway:Tokyu.Meguro",
    "東急池上線": "odpt.Railway:Tokyu.Ikegami",
    "東急多摩川線": "odpt.Railway:Tokyu.Tamagawa",
    "東急大井町線": "odpt.Railway:Tokyu.Oimachi",
    "東急世田谷線": "odpt.Railway:Tokyu.Setagaya",
    "東急こどもの国線": "odpt.Railway:Tokyu.Kodomonokuni",
    # Keio
    "京王線": "odpt.Railway:Keio.Keio",
    "京王井の頭線": "odpt.Railway:Keio.Inokashira",
    "京王相模原線": "odpt.Railway:Keio.Sagamihara",
    "京王高尾線": "odpt.Railway:Keio.Takao",
    "京王動物園線": "odpt.Railway:Keio.Dobutsuen",
    "京王競馬場線": "odpt.Railway:Keio.Keibajo",
    "京王新線": "odpt.Railway:Keio.New",
    # Odakyu
    "小田急線": "odpt.Railway:Odakyu.Odawara",
    "小田急小田原線": "odpt.Railway:Odakyu.Odawara",
    "小田急江ノ島線": "odpt.Railway:Odakyu.Enoshima",
    "小田急多摩線": "odpt.Railway:Odakyu.Tama",
    # Seibu
    "西武新宿線": "odpt.Railway:Seibu.Shinjuku",
    "西武池袋線": "odpt.Railway:Seibu.Ikebukuro",
    "西武有楽町線": "odpt.Railway:Seibu.Yurakucho",
    "西武豊島線": "odpt.Railway:Seibu.Toshima",
    "西武狭山線": "odpt.Railway:Seibu.Sayama",
    "西武多摩湖線": "odpt.Railway:Seibu.Tamako",
    "西武国分寺線": "odpt.Railway:Seibu.Kokubunji",
    "西武多摩川線": "odpt.Railway:Seibu.Tamagawa",
    "西武拝島線": "odpt.Railway:Seibu.Haijima",
    "西武秩父線": "odpt.Railway:Seibu.SeibuChichibu",
    "西武山口線": "odpt.Railway:Seibu.Yamaguchi",
    # Tobu
    "東武東上線": "odpt.Railway:Tobu.Tojo",
    "東武東上本線": "odpt.Railway:Tobu.Tojo",
    "東武スカイツリーライン": "odpt.Railway:Tobu.TobuSkytree",
    "東武伊勢崎線": "odpt.Railway:Tobu.TobuSkytree",
    "東武亀戸線": "odpt.Railway:Tobu.Kameido",
    "東武大師線": "odpt.Railway:Tobu.Daishi",
    "東武佐野線": "odpt.Railway:Tobu.Sano",
    "東武桐生線": "odpt.Railway:Tobu.Kiryu",
    "東武小泉線": "odpt.Railway:Tobu.Koizumi",
    "東武日光線": "odpt.Railway:Tobu.Nikko",
    "東武宇都宮線": "odpt.Railway:Tobu.Utsunomiya",
    "東武鬼怒川線": "odpt.Railway:Tobu.Kinugawa",
    "東武野田線": "odpt.Railway:Tobu.TobuUrbanPark",
    "東武アーバンパークライン": "odpt.Railway:Tobu.TobuUrbanPark",
    # Keisei
    "京成本線": "odpt.Railway:Keisei.Main",
    "京成押上線": "odpt.Railway:Keisei.Oshiage",
    "京成金町線": "odpt.Railway:Keisei.Kanamachi",
    "京成千葉線": "odpt.Railway:Keisei.Chiba",
    "京成千原線": "odpt.Railway:Keisei.Chihara",
    "京成成田スカイアクセス": "odpt.Railway:Keisei.NaritaSkyAccess",
    "成田スカイアクセス": "odpt.Railway:Keisei.NaritaSkyAccess",
    # Keikyu
    "京急本線": "odpt.Railway:Keikyu.Main",
    "京急空港線": "odpt.Railway:Keikyu.Airport",
    "京急大師線": "odpt.Railway:Keikyu.Daishi",
    "京急逗子線": "odpt.Railway:Keikyu.Zushi",
    "京急久里浜線": "odpt.Railway:Keikyu.Kurihama",
    # Other operators
    "りんかい線": "odpt.Railway:TWR.Rinkai",
    "東京臨海高速鉄道りんかい線": "odpt.Railway:TWR.Rinkai",
    "ゆりかもめ": "odpt.Railway:Yurikamome.Yurikamome",
    "東京モノレール": "odpt.Railway:TokyoMonorail.HanedaAirport",
    "東京モノレール羽田空港線": "odpt.Railway:TokyoMonorail.HanedaAirport",
    "多摩都市モノレール": "odpt.Railway:TamaMonorail.TamaMonorail",
    "多摩モノレール": "odpt.Railway:TamaMonorail.TamaMonorail",
    "日暮里・舎人ライナー": "odpt.Railway:Toei.NipporiToneri",
    "つくばエクスプレス": "odpt.Railway:MIR.TsukubaExpress",
    "北総線": "odpt.Railway:Hokuso.Hokuso",
    "芝山鉄道線": "odpt.Railway:Shibayama.Shibayama",
    "東葉高速線": "odpt.Railway:ToyoRapid.ToyoRapid",
    "埼玉高速鉄道線": "odpt.Railway:SaitamaRailway.SaitamaRailway",
    "横浜高速鉄道みなとみらい線": "odpt.Railway:YokohamaMinatomirai.Minatomirai",
    "みなとみらい線": "odpt.Railway:YokohamaMinatomirai.Minatomirai",
}
