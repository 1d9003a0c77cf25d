"""Variable width bit packing codecs.

Unlike RadixConverter these codecs have no fixed byte/symbol block ratio.
Input bytes feed a bit accumulator and groups of bits are drained into
symbols as soon as enough are buffered.

- BitPackCodec91: basE91 (Joachim Henke), drains 13 or 14 bits per symbol pair
- BitPackCodec2048: drains exactly 11 bits per symbol, with an 8 symbol
  pad alphabet for a final group of at most 3 bits
- BitPackCodec1024: Ecoji, 10 bits per symbol in groups of 5 bytes / 4 symbols
"""

from __future__ import annotations

from collections.abc import Sequence

from baseex.core.codec import Codec
from baseex.core.errors import DecodingError

BASE91_SYMBOLS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "!#$%&()*+,./:;<=>?@[]^_`{|}~\""
)

BASE2048_SYMBOLS = (
    "89ABCDEFGHIJKLMNOPQRSTUVWXYZabcd"
    "efghijklmnopqrstuvwxyzÆÐØÞßæðøþĐ"
    "đĦħıĸŁłŊŋŒœŦŧƀƁƂƃƄƅƆƇƈƉƊƋƌƍƎƏƐƑƒ"
    "ƓƔƕƖƗƘƙƚƛƜƝƞƟƢƣƤƥƦƧƨƩƪƫƬƭƮƱƲƳƴƵƶ"
    "ƷƸƹƺƻƼƽƾƿǀǁǂǃǝǤǥǶǷȜȝȠȡȢȣȤȥȴȵȶȷȸȹ"
    "ȺȻȼȽȾȿɀɁɂɃɄɅɆɇɈɉɊɋɌɍɎɏɐɑɒɓɔɕɖɗɘə"
    "ɚɛɜɝɞɟɠɡɢɣɤɥɦɧɨɩɪɫɬɭɮɯɰɱɲɳɴɵɶɷɸɹ"
    "ɺɻɼɽɾɿʀʁʂʃʄʅʆʇʈʉʊʋʌʍʎʏʐʑʒʓʔʕʖʗʘʙ"
    "ʚʛʜʝʞʟʠʡʢʣʤʥʦʧʨʩʪʫʬʭʮʯͰͱͲͳͶͷͻͼͽͿ"
    "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩαβγδεζηθ"
    "ικλμνξοπρςστυφχψωϏϗϘϙϚϛϜϝϞϟϠϡϢϣϤ"
    "ϥϦϧϨϩϪϫϬϭϮϯϳϷϸϺϻϼϽϾϿЂЄЅІЈЉЊЋЏАБВ"
    "ГДЕЖЗИКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯабвг"
    "дежзиклмнопрстуфхцчшщъыьэюяђєѕіј"
    "љњћџѠѡѢѣѤѥѦѧѨѩѪѫѬѭѮѯѰѱѲѳѴѵѸѹѺѻѼѽ"
    "ѾѿҀҁҊҋҌҍҎҏҐґҒғҔҕҖҗҘҙҚқҜҝҞҟҠҡҢңҤҥ"
    "ҦҧҨҩҪҫҬҭҮүҰұҲҳҴҵҶҷҸҹҺһҼҽҾҿӀӃӄӅӆӇ"
    "ӈӉӊӋӌӍӎӏӔӕӘәӠӡӨөӶӷӺӻӼӽӾӿԀԁԂԃԄԅԆԇ"
    "ԈԉԊԋԌԍԎԏԐԑԒԓԔԕԖԗԘԙԚԛԜԝԞԟԠԡԢԣԤԥԦԧ"
    "ԨԩԪԫԬԭԮԯԱԲԳԴԵԶԷԸԹԺԻԼԽԾԿՀՁՂՃՄՅՆՇՈ"
    "ՉՊՋՌՍՎՏՐՑՒՓՔՕՖաբգդեզէըթժիլխծկհձղ"
    "ճմյնշոչպջռսվտրցւփքօֆאבגדהוזחטיךכ"
    "לםמןנסעףפץצקרשתװױײؠءابةتثجحخدذرز"
    "سشصضطظعغػؼؽؾؿفقكلمنهوىي٠١٢٣٤٥٦٧٨"
    "٩ٮٯٱٲٳٴٹٺٻټٽپٿڀځڂڃڄڅچڇڈډڊڋڌڍڎڏڐڑ"
    "ڒړڔڕږڗژڙښڛڜڝڞڟڠڡڢڣڤڥڦڧڨکڪګڬڭڮگڰڱ"
    "ڲڳڴڵڶڷڸڹںڻڼڽھڿہۃۄۅۆۇۈۉۊۋیۍێۏېۑےە"
    "ۮۯ۰۱۲۳۴۵۶۷۸۹ۺۻۼۿܐܒܓܔܕܖܗܘܙܚܛܜܝܞܟܠ"
    "ܡܢܣܤܥܦܧܨܩܪܫܬܭܮܯݍݎݏݐݑݒݓݔݕݖݗݘݙݚݛݜݝ"
    "ݞݟݠݡݢݣݤݥݦݧݨݩݪݫݬݭݮݯݰݱݲݳݴݵݶݷݸݹݺݻݼݽ"
    "ݾݿހށނރބޅކއވމފދތލގޏސޑޒޓޔޕޖޗޘޙޚޛޜޝ"
    "ޞޟޠޡޢޣޤޥޱ߀߁߂߃߄߅߆߇߈߉ߊߋߌߍߎߏߐߑߒߓߔߕߖ"
    "ߗߘߙߚߛߜߝߞߟߠߡߢߣߤߥߦߧߨߩߪࠀࠁࠂࠃࠄࠅࠆࠇࠈࠉࠊࠋ"
    "ࠌࠍࠎࠏࠐࠑࠒࠓࠔࠕࡀࡁࡂࡃࡄࡅࡆࡇࡈࡉࡊࡋࡌࡍࡎࡏࡐࡑࡒࡓࡔࡕ"
    "ࡖࡗࡘࡠࡡࡢࡣࡤࡥࡦࡧࡨࡩࡪࢠࢡࢢࢣࢤࢥࢦࢧࢨࢩࢪࢫࢬࢭࢮࢯࢰࢱ"
    "ࢲࢳࢴࢶࢷࢸࢹࢺࢻࢼࢽऄअआइईउऊऋऌऍऎएऐऑऒओऔकखगघ"
    "ङचछजझञटठडढणतथदधनपफबभमयरलळवशषसहऽॐ"
    "ॠॡ०१२३४५६७८९ॲॳॴॵॶॷॸॹॺॻॼॽॾॿঀঅআইঈউ"
    "ঊঋঌএঐওঔকখগঘঙচছজঝঞটঠডঢণতথদধনপফবভম"
    "যরলশষসহঽৎৠৡ০১২৩৪৫৬৭৮৯ৰৱ৴৵৶৷৸৹ৼਅਆ"
    "ਇਈਉਊਏਐਓਔਕਖਗਘਙਚਛਜਝਞਟਠਡਢਣਤਥਦਧਨਪਫਬਭ"
    "ਮਯਰਲਵਸਹੜ੦੧੨੩੪੫੬੭੮੯ੲੳੴઅઆઇઈઉઊઋઌઍએઐ"
    "ઑઓઔકખગઘઙચછજઝઞટઠડઢણતથદધનપફબભમયરલળ"
    "વશષસહઽૐૠૡ૦૧૨૩૪૫૬૭૮૯ૹଅଆଇଈଉଊଋଌଏଐଓଔ"
    "କଖଗଘଙଚଛଜଝଞଟଠଡଢଣତଥଦଧନପଫବଭମଯରଲଳଵଶଷ"
    "ସହଽୟୠୡ୦୧୨୩୪୫୬୭୮୯ୱ୲୳୴୵୶୷ஃஅஆஇஈஉஊஎஏ"
    "ஐஒஓகஙசஜஞடணதநனபமயரறலளழவஶஷஸஹௐ௦௧௨௩௪"
    "௫௬௭௮௯௰௱௲అఆఇఈఉఊఋఌఎఏఐఒఓఔకఖగఘఙచఛజఝఞ"
    "టఠడఢణతథదధనపఫబభమయరఱలళఴవశషసహఽౘౙౚౠౡ"
    "౦౧౨౩౪౫౬౭౮౯౸౹౺౻౼౽౾ಀಅಆಇಈಉಊಋಌಎಏಐಒಓಔ"
    "ಕಖಗಘಙಚಛಜಝಞಟಠಡಢಣತಥದಧನಪಫಬಭಮಯರಱಲಳವಶ"
    "ಷಸಹಽೞೠೡ೦೧೨೩೪೫೬೭೮೯ೱೲഅആഇഈഉഊഋഌഎഏഐഒഓ"
    "ഔകഖഗഘങചഛജഝഞടഠഡഢണതഥദധനഩപഫബഭമയരറലള"
    "ഴവശഷസഹഺഽൎൔൕൖ൘൙൚൛൜൝൞ൟൠൡ൦൧൨൩൪൫൬൭൮൯"
    "൰൱൲൳൴൵൶൷൸ൺൻർൽൾൿඅආඇඈඉඊඋඌඍඎඏඐඑඒඓඔඕ"
    "ඖකඛගඝඞඟචඡජඣඤඥඦටඨඩඪණඬතථදධනඳපඵබභමඹ"
    "යරලවශෂසහළෆ෦෧෨෩෪෫෬෭෮෯กขฃคฅฆงจฉชซฌ"
    "ญฎฏฐฑฒณดตถทธนบปผฝพฟภมยรฤลฦวศษสหฬ"
    "อฮฯะาเแโใไๅ๐๑๒๓๔๕๖๗๘๙ກຂຄງຈຊຍດຕຖທ"
    "ນບປຜຝພຟມຢຣລວສຫອຮຯະາຽເແໂໃໄ໐໑໒໓໔໕໖"
    "໗໘໙ໞໟༀ༠༡༢༣༤༥༦༧༨༩༪༫༬༭༮༯༰༱༲༳ཀཁགངཅཆ"
    "ཇཉཊཋཌཎཏཐདནཔཕབམཙཚཛཝཞཟའཡརལཤཥསཧཨཪཫཬ"
    "ྈྉྊྋྌကခဂဃငစဆဇဈဉညဋဌဍဎဏတထဒဓနပဖဗဘမယ"
    "ရလဝသဟဠအဢဣဤဥဧဨဩဪဿ၀၁၂၃၄၅၆၇၈၉ၐၑၒၓၔၕ"
)

BASE2048_PAD_SYMBOLS = "01234567"


class BitPackCodec91(Codec):
    """basE91 bit packer.

    Each symbol pair carries 13 bits, or 14 bits when the 13 bit value is
    below 89, so 91 * 91 = 8281 combinations cover both cases.

    Example:
        >>> BitPackCodec91().encode(b"test")
        ('fPNKd', 0)
    """

    radix = 91

    # Values below this take the 14 bit path
    THRESHOLD = 89

    def encode(
        self,
        input_bytes: bytes,
        charset: Sequence[str] = BASE91_SYMBOLS,
        little_endian: bool = False,
    ) -> tuple[str, int]:
        """Pack bytes into basE91 symbols.

        Args:
            input_bytes: Bytes to encode
            charset: 91 symbol table
            little_endian: Reverse the input before packing

        Returns:
            Tuple of (encoded string, 0). Packers never add zero bytes.
        """
        data = bytes(input_bytes)
        if little_endian:
            data = data[::-1]

        output = []
        n = 0
        bit_count = 0

        for byte in data:
            n += byte << bit_count
            bit_count += 8

            if bit_count > 13:
                count = 13
                rn = n % 8192
                if rn < self.THRESHOLD:
                    count = 14
                    rn = n % 16384

                n >>= count
                bit_count -= count

                q, r = divmod(rn, 91)
                output.append(charset[r])
                output.append(charset[q])

        if bit_count:
            q, r = divmod(n, 91)
            output.append(charset[r])
            if bit_count > 7 or n > 90:
                output.append(charset[q])

        return "".join(output), 0

    def decode(
        self,
        text: str,
        charset: Sequence[str] = BASE91_SYMBOLS,
        pad_symbols: Sequence[str] = (),
        integrity: bool = True,
        little_endian: bool = False,
    ) -> bytes:
        """Unpack basE91 symbols into bytes.

        Args:
            text: Encoded string
            charset: 91 symbol table
            pad_symbols: Unused, basE91 has no padding
            integrity: Raise on unknown symbols; when off they are dropped
            little_endian: Reverse the unpacked bytes

        Returns:
            Decoded bytes

        Raises:
            DecodingError: If a symbol is not part of the charset
        """
        lookup = {symbol: i for i, symbol in enumerate(charset)}
        chars = list(text)
        if not integrity:
            chars = [c for c in chars if c in lookup]

        def index(char: str) -> int:
            try:
                return lookup[char]
            except KeyError:
                raise DecodingError(char) from None

        length = len(chars)
        odd = length % 2 == 1
        if odd:
            length -= 1

        output = bytearray()
        n = 0
        bit_count = 0

        for i in range(0, length, 2):
            rn = index(chars[i]) + index(chars[i + 1]) * 91
            n += rn << bit_count
            bit_count += 13 if rn % 8192 > 88 else 14

            while True:
                output.append(n % 256)
                n >>= 8
                bit_count -= 8
                if bit_count <= 7:
                    break

        if odd:
            output.append(((index(chars[-1]) << bit_count) + n) % 256)

        if little_endian:
            output.reverse()
        return bytes(output)


class BitPackCodec2048(Codec):
    """Packs 11 bits into every symbol of a 2048 symbol alphabet.

    A trailing group of 1 to 3 bits is written with one symbol of the pad
    alphabet (3 bits), a longer trailing group with one main symbol. In
    both cases the missing low bits are zero.
    """

    radix = 2048

    BITS_PER_SYMBOL = 11
    BITS_PER_PAD = 3

    def encode(
        self,
        input_bytes: bytes,
        charset: Sequence[str] = BASE2048_SYMBOLS,
        little_endian: bool = False,
        pad_symbols: Sequence[str] = BASE2048_PAD_SYMBOLS,
    ) -> tuple[str, int]:
        """Pack bytes into 11 bit symbols.

        Args:
            input_bytes: Bytes to encode
            charset: 2048 symbol table
            little_endian: Reverse the input before packing
            pad_symbols: 8 symbol table for a final group of <= 3 bits

        Returns:
            Tuple of (encoded string, number of zero bits appended)
        """
        data = bytes(input_bytes)
        if little_endian:
            data = data[::-1]

        output = []
        z = 0
        bit_count = 0

        for byte in data:
            for shift in range(7, -1, -1):
                z = (z << 1) | ((byte >> shift) & 1)
                bit_count += 1
                if bit_count == self.BITS_PER_SYMBOL:
                    output.append(charset[z])
                    z = 0
                    bit_count = 0

        padding = 0
        if bit_count:
            if bit_count <= self.BITS_PER_PAD:
                padding = self.BITS_PER_PAD - bit_count
                output.append(pad_symbols[z << padding])
            else:
                padding = self.BITS_PER_SYMBOL - bit_count
                output.append(charset[z << padding])

        return "".join(output), padding

    def decode(
        self,
        text: str,
        charset: Sequence[str] = BASE2048_SYMBOLS,
        pad_symbols: Sequence[str] = BASE2048_PAD_SYMBOLS,
        integrity: bool = True,
        little_endian: bool = False,
    ) -> bytes:
        """Unpack 11 bit symbols into bytes.

        Args:
            text: Encoded string
            charset: 2048 symbol table
            pad_symbols: 8 symbol table, only allowed as the last symbol
            integrity: Raise on unknown symbols instead of skipping them
            little_endian: Reverse the unpacked bytes

        Returns:
            Decoded bytes

        Raises:
            DecodingError: If a symbol is unknown or a pad symbol is not last
        """
        lookup = {symbol: i for i, symbol in enumerate(charset)}
        pad_lookup = {symbol: i for i, symbol in enumerate(pad_symbols)}

        output = bytearray()
        last = len(text) - 1
        uint8 = 0
        bit_count = 0

        for i, char in enumerate(text):
            if char in lookup:
                z = lookup[char]
                width = self.BITS_PER_SYMBOL
            elif char in pad_lookup:
                if i != last:
                    raise DecodingError(
                        char,
                        f"Secondary character found before end of input, index: {i}",
                    )
                z = pad_lookup[char]
                width = self.BITS_PER_PAD
            elif integrity:
                raise DecodingError(char)
            else:
                continue

            for shift in range(width - 1, -1, -1):
                uint8 = (uint8 << 1) | ((z >> shift) & 1)
                bit_count += 1
                if bit_count == 8:
                    output.append(uint8)
                    uint8 = 0
                    bit_count = 0

        # Remaining bits are zero padding from the encoder
        if little_endian:
            output.reverse()
        return bytes(output)


class BitPackCodec1024(Codec):
    """Packs 5 bytes into 4 symbols of a 1024 symbol alphabet (Ecoji).

    A final group of 1 to 3 bytes keeps only the symbols that carry data.
    A final group of 4 bytes leaves 2 bits for the fourth symbol, which is
    written with one of four "last" pad symbols. The fill symbol that
    completes a short group is left to the caller, since whether and how
    often it repeats depends on the Ecoji version.

    Pad symbol layout: four "last" symbols followed by the fill symbol.
    """

    radix = 1024

    BITS_PER_SYMBOL = 10
    GROUP_BYTES = 5
    GROUP_SYMBOLS = 4

    def encode(
        self,
        input_bytes: bytes,
        charset: Sequence[str],
        little_endian: bool = False,
        pad_symbols: Sequence[str] = (),
    ) -> tuple[str, int]:
        """Pack bytes into 10 bit symbols.

        Args:
            input_bytes: Bytes to encode
            charset: 1024 symbol table
            little_endian: Reverse the input before packing
            pad_symbols: Four "last" symbols and the fill symbol

        Returns:
            Tuple of (encoded string, number of fill symbols the final
            group is missing)
        """
        data = bytes(input_bytes)
        if little_endian:
            data = data[::-1]

        output = []
        missing = 0

        for start in range(0, len(data), self.GROUP_BYTES):
            chunk = data[start : start + self.GROUP_BYTES]
            n = int.from_bytes(chunk.ljust(self.GROUP_BYTES, b"\x00"), "big")
            values = [
                (n >> (self.BITS_PER_SYMBOL * i)) & 0x3FF
                for i in range(self.GROUP_SYMBOLS - 1, -1, -1)
            ]

            if len(chunk) == self.GROUP_BYTES:
                output.extend(charset[v] for v in values)
            elif len(chunk) == 4:
                output.extend(charset[v] for v in values[:3])
                # Only the top 2 bits of the last value carry data
                output.append(pad_symbols[values[3] >> 8])
            else:
                output.extend(charset[v] for v in values[: len(chunk)])
                missing = self.GROUP_SYMBOLS - len(chunk)

        return "".join(output), missing

    def decode(
        self,
        text: str,
        charset: Sequence[str],
        pad_symbols: Sequence[str] = (),
        integrity: bool = True,
        little_endian: bool = False,
    ) -> bytes:
        """Unpack 10 bit symbols into bytes.

        Concatenated encodings are accepted: every pad symbol closes the
        group it belongs to and decoding continues with the next symbol.

        Args:
            text: Encoded string
            charset: 1024 symbol table
            pad_symbols: Four "last" symbols and the fill symbol
            integrity: Check the position of pad symbols and reject unknown
                symbols and a truncated final group
            little_endian: Reverse the unpacked bytes

        Returns:
            Decoded bytes

        Raises:
            DecodingError: If integrity is on and the input is malformed
        """
        lookup = {symbol: i for i, symbol in enumerate(charset)}
        last_pads = {symbol: i for i, symbol in enumerate(pad_symbols[:4])}
        fill = pad_symbols[4] if len(pad_symbols) > 4 else None

        output = bytearray()
        group: list[int] = []
        after_fill = False

        def flush(byte_count: int) -> None:
            n = 0
            for value in group + [0] * (self.GROUP_SYMBOLS - len(group)):
                n = (n << self.BITS_PER_SYMBOL) | value
            output.extend(n.to_bytes(self.GROUP_BYTES, "big")[:byte_count])
            group.clear()

        for char in text:
            if char in lookup:
                group.append(lookup[char])
                after_fill = False
                if len(group) == self.GROUP_SYMBOLS:
                    flush(self.GROUP_BYTES)
            elif char in last_pads:
                if len(group) != self.GROUP_SYMBOLS - 1:
                    if integrity:
                        raise DecodingError(char, f"Last padding seen in unexpected position {char}")
                    continue
                group.append(last_pads[char] << 8)
                flush(4)
                after_fill = False
            elif char == fill:
                if group:
                    # 1, 2 or 3 symbols hold exactly as many bytes
                    flush(len(group))
                elif integrity and not after_fill:
                    raise DecodingError(char, f"Padding unexpectedly seen in first position {char}")
                after_fill = True
            elif integrity:
                raise DecodingError(char)

        if group:
            if integrity:
                raise DecodingError(
                    "", "Unexpected end of data, input data size not multiple of 4"
                )
            flush(len(group))

        if little_endian:
            output.reverse()
        return bytes(output)
